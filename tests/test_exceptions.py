from swing_classifier.exceptions import ConfigurationError, SchemaMismatchError, SwingModelError


class TestExceptionInheritance:
    def test_base_is_exception(self) -> None:
        assert issubclass(SwingModelError, Exception)

    def test_configuration_error_inherits_base(self) -> None:
        assert issubclass(ConfigurationError, SwingModelError)

    def test_schema_mismatch_inherits_base(self) -> None:
        assert issubclass(SchemaMismatchError, SwingModelError)


class TestSchemaMismatchError:
    def test_carries_column_lists(self) -> None:
        error = SchemaMismatchError("bad columns", missing=['a'], unexpected=['b'])

        assert str(error) == "bad columns"
        assert error.missing == ['a']
        assert error.unexpected == ['b']

    def test_defaults_to_empty_lists(self) -> None:
        error = SchemaMismatchError("bad columns")

        assert error.missing == []
        assert error.unexpected == []
