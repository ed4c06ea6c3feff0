"""Local conversion through a headless LibreOffice/OpenOffice install.

Lookup order for the executable:
1. The explicitly configured path (SOFFICE_PATH).
2. Well-known installation paths for Linux, macOS and Windows.
3. `soffice` / `libreoffice` on PATH, accepted only when `--version`
   reports a recognizable office-suite product.
"""

import shutil
import subprocess
from pathlib import Path
from typing import ClassVar

from app.conversion.base import BasePdfConverter
from app.conversion.exceptions import ConversionError, ConverterNotFoundError
from app.conversion.wait import wait_for_file
from app.logging.logger import Log

DEFAULT_SOFFICE_PATHS: tuple[str, ...] = (
    "/usr/bin/soffice",
    "/usr/lib/libreoffice/program/soffice",
    "/opt/libreoffice/program/soffice",
    "/snap/bin/libreoffice",
    "/Applications/LibreOffice.app/Contents/MacOS/soffice",
    r"C:\Program Files\LibreOffice\program\soffice.exe",
    r"C:\Program Files (x86)\LibreOffice\program\soffice.exe",
)
PATH_CANDIDATES: tuple[str, ...] = ("soffice", "libreoffice")
PRODUCT_MARKERS: tuple[str, ...] = ("LibreOffice", "OpenOffice")


def _reports_office_suite(executable: str) -> bool:
    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            timeout=15,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        Log.debug(f"Probing {executable} --version failed: {exc}")
        return False
    output = f"{completed.stdout}{completed.stderr}"
    return any(marker in output for marker in PRODUCT_MARKERS)


def locate_soffice(
    configured_path: str = "",
    default_paths: tuple[str, ...] = DEFAULT_SOFFICE_PATHS,
) -> str:
    """Return the office-suite executable to use for conversions.

    Raises:
        ConverterNotFoundError: if nothing usable is found.
    """
    if configured_path:
        if Path(configured_path).is_file():
            return configured_path
        Log.warning(f"Configured SOFFICE_PATH {configured_path} does not exist")

    for candidate in default_paths:
        if Path(candidate).is_file():
            return candidate

    for name in PATH_CANDIDATES:
        found = shutil.which(name)
        if found and _reports_office_suite(found):
            return found

    raise ConverterNotFoundError(
        "No LibreOffice/OpenOffice executable found; set SOFFICE_PATH"
    )


class SofficeConverter(BasePdfConverter):
    """Converts documents by shelling out to `soffice --headless --convert-to`."""

    name: ClassVar[str] = "soffice"

    def __init__(
        self,
        *,
        configured_path: str = "",
        timeout_seconds: int = 120,
        wait_seconds: float = 60.0,
    ) -> None:
        self._configured_path = configured_path
        self._timeout_seconds = timeout_seconds
        self._wait_seconds = wait_seconds
        self._executable: str | None = None

    @property
    def executable(self) -> str:
        if self._executable is None:
            self._executable = locate_soffice(self._configured_path)
            Log.info(f"Using office suite at {self._executable}")
        return self._executable

    def convert(self, input_path: Path, target_format: str, out_dir: Path) -> Path:
        """Run a headless conversion and return the produced file.

        soffice names its output after the input stem, so the result is
        <out_dir>/<input stem>.<extension of target_format>.
        """
        out_dir.mkdir(parents=True, exist_ok=True)
        extension = target_format.split(":", 1)[0]
        expected = out_dir / f"{input_path.stem}.{extension}"
        command = [
            self.executable,
            "--headless",
            "--norestore",
            "--convert-to",
            target_format,
            "--outdir",
            str(out_dir),
            str(input_path),
        ]
        Log.info(f"Converting {input_path.name} to {extension} with soffice")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(
                f"soffice did not finish within {self._timeout_seconds}s for {input_path.name}"
            ) from exc
        except OSError as exc:
            raise ConversionError(f"Could not start soffice: {exc}") from exc

        if completed.returncode != 0:
            raise ConversionError(
                f"soffice exited with {completed.returncode}: {completed.stderr.strip()}"
            )
        return wait_for_file(expected, max_wait_seconds=self._wait_seconds)

    def convert_to_pdf(self, input_path: Path, output_path: Path) -> Path:
        produced = self.convert(input_path, "pdf", output_path.parent)
        if produced != output_path:
            produced.replace(output_path)
        Log.info(f"soffice produced {output_path.name}")
        return output_path
