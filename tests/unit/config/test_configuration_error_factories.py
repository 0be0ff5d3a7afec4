import pytest

from berlin_clock.config.errors import ConfigurationError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (ConfigurationError.missing_value, ("FLAG",), "Required environment variable 'FLAG' is not set"),
        (ConfigurationError.missing_value, ("FLAG", "needed for logs"), "Required environment variable 'FLAG' is not set: needed for logs"),
        (ConfigurationError.invalid_value, ("FLAG", "maybe"), "Invalid value for FLAG: 'maybe'"),
        (ConfigurationError.invalid_value, ("FLAG", "maybe", "Expected a boolean"), "Invalid value for FLAG: 'maybe'. Expected a boolean"),
        (ConfigurationError.load_failed, ("defaults",), "Failed to load defaults"),
        (ConfigurationError.load_failed, ("defaults", ".env"), "Failed to load defaults from .env"),
    ],
)
def test_factories_build_messages(factory, args, expected) -> None:
    err = factory(*args)

    assert isinstance(err, ConfigurationError)
    assert isinstance(err, RuntimeError)
    assert str(err) == expected
