from pathlib import Path

import pytest

from app.config.settings import Settings
from app.conversion.cloudconvert_client import CloudConvertClient
from app.conversion.factory import ConverterFactory
from app.conversion.soffice_converter import SofficeConverter


def _settings(**overrides: object) -> Settings:
    return Settings(uploads_dir=Path("uploads"), **overrides)


class TestConverterFactory:
    @pytest.mark.parametrize("engine", ["none", "", "  NONE "])
    def test_disabled(self, engine: str) -> None:
        assert ConverterFactory.create(_settings(conversion_engine=engine)) is None

    def test_cloudconvert(self) -> None:
        converter = ConverterFactory.create(
            _settings(conversion_engine="CloudConvert", cloudconvert_api_key="k" * 12)
        )
        assert isinstance(converter, CloudConvertClient)
        assert converter.name == "cloudconvert"

    def test_soffice(self) -> None:
        converter = ConverterFactory.create(
            _settings(conversion_engine="soffice", soffice_path="/opt/office/soffice")
        )
        assert isinstance(converter, SofficeConverter)
        assert converter.name == "soffice"

    def test_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown conversion engine"):
            ConverterFactory.create(_settings(conversion_engine="gotenberg"))
