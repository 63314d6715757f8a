import pytest
from pydantic import ValidationError

from atena_layout import AtenaValidationError, LayoutSettings
from atena_layout.config import DEFAULT_HONORIFIC_ENV, ENCODING_ENV, MAX_LINE_LENGTH_ENV


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (MAX_LINE_LENGTH_ENV, DEFAULT_HONORIFIC_ENV, ENCODING_ENV):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLayoutSettings:
    def test_defaults(self) -> None:
        settings = LayoutSettings()
        assert settings.max_line_length == 20
        assert settings.default_honorific == "様"
        assert settings.encoding == "cp932"

    @pytest.mark.parametrize("width", [0, -5])
    def test_width_must_be_positive(self, width: int) -> None:
        with pytest.raises(ValidationError):
            LayoutSettings(max_line_length=width)

    def test_blank_honorific_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LayoutSettings(default_honorific="　")

    def test_frozen(self) -> None:
        settings = LayoutSettings()
        with pytest.raises(ValidationError):
            settings.max_line_length = 10  # type: ignore[misc]


class TestCreate:
    def test_valid(self) -> None:
        assert LayoutSettings.create(max_line_length=12).max_line_length == 12

    def test_invalid_is_wrapped(self) -> None:
        with pytest.raises(AtenaValidationError) as exc_info:
            LayoutSettings.create(max_line_length=0)
        error = exc_info.value
        assert error.context["package"] == "atena_layout"
        assert error.errors()[0]["loc"] == ("max_line_length",)
        assert isinstance(error.original_error, ValidationError)


class TestFromEnv:
    def test_no_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        assert LayoutSettings.from_env() == LayoutSettings()

    def test_variables_override(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(MAX_LINE_LENGTH_ENV, "16")
        clean_env.setenv(DEFAULT_HONORIFIC_ENV, "殿")
        clean_env.setenv(ENCODING_ENV, "utf-8")

        settings = LayoutSettings.from_env()
        assert settings.max_line_length == 16
        assert settings.default_honorific == "殿"
        assert settings.encoding == "utf-8"

    def test_invalid_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(MAX_LINE_LENGTH_ENV, "wide")
        with pytest.raises(AtenaValidationError):
            LayoutSettings.from_env()
