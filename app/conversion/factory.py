from app.config.settings import Settings
from app.conversion.base import BasePdfConverter
from app.conversion.cloudconvert_client import CloudConvertClient
from app.conversion.soffice_converter import SofficeConverter


class ConverterFactory:
    """Creates the PDF converter named by settings.conversion_engine."""

    ENGINES: tuple[str, ...] = ("none", "cloudconvert", "soffice")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfConverter | None:
        """Return the configured converter, or None when conversion is disabled."""
        engine = settings.conversion_engine.strip().lower()
        if engine in ("", "none"):
            return None
        if engine == "cloudconvert":
            return CloudConvertClient(
                api_key=settings.cloudconvert_api_key,
                base_url=settings.cloudconvert_base_url,
                sync_base_url=settings.cloudconvert_sync_base_url,
                timeout_seconds=settings.cloudconvert_timeout_seconds,
            )
        if engine == "soffice":
            return cls.create_soffice(settings)
        raise ValueError(
            f"Unknown conversion engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )

    @classmethod
    def create_soffice(cls, settings: Settings) -> SofficeConverter:
        return SofficeConverter(
            configured_path=settings.soffice_path,
            timeout_seconds=settings.soffice_timeout_seconds,
            wait_seconds=settings.conversion_wait_seconds,
        )
