"""CloudConvert API v2 adapter.

One conversion is a three-task job:
import/upload -> convert (to pdf) -> export/url.
The raw file is posted to the upload form of the import task, the job is
awaited through the synchronous API, and the exported file is downloaded.
"""

from pathlib import Path
from typing import Any, ClassVar

import httpx

from app.conversion.base import BasePdfConverter
from app.conversion.exceptions import (
    ConversionError,
    ConversionExportMissingError,
    ConversionQuotaExceededError,
    ConversionRateLimitedError,
    ConversionUploadTargetMissingError,
)
from app.logging.logger import Log

IMPORT_TASK = "import-file"
CONVERT_TASK = "convert-file"
EXPORT_TASK = "export-file"
QUOTA_ERROR_CODES = frozenset({"CREDITS_EXCEEDED", "PAYMENT_REQUIRED"})


def mask_api_key(api_key: str) -> str:
    if not api_key:
        return "(not set)"
    if len(api_key) <= 8:
        return "****"
    return f"{api_key[:4]}...{api_key[-4:]}"


class CloudConvertClient(BasePdfConverter):
    """Converts documents to PDF through the CloudConvert REST API."""

    name: ClassVar[str] = "cloudconvert"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.cloudconvert.com/v2",
        sync_base_url: str = "https://sync.api.cloudconvert.com/v2",
        timeout_seconds: int = 300,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._sync_base_url = sync_base_url.rstrip("/")
        self._client = http_client or httpx.Client(timeout=timeout_seconds)
        Log.info(f"CloudConvert client configured, API key {mask_api_key(api_key)}")

    def convert_to_pdf(self, input_path: Path, output_path: Path) -> Path:
        if not self._api_key:
            raise ConversionError("CLOUDCONVERT_API_KEY is not set")

        job = self._create_job()
        Log.info(f"CloudConvert job {job.get('id')} created for {input_path.name}")
        self._upload(job, input_path)
        finished = self._wait_for_job(str(job.get("id")))
        export_url = self._export_url(finished)
        self._download(export_url, output_path)
        Log.info(f"CloudConvert job {finished.get('id')} exported {output_path.name}")
        return output_path

    def _create_job(self) -> dict[str, Any]:
        payload = {
            "tasks": {
                IMPORT_TASK: {"operation": "import/upload"},
                CONVERT_TASK: {
                    "operation": "convert",
                    "input": IMPORT_TASK,
                    "output_format": "pdf",
                },
                EXPORT_TASK: {"operation": "export/url", "input": CONVERT_TASK},
            }
        }
        response = self._send(
            "POST", f"{self._base_url}/jobs", json=payload, headers=self._auth_headers()
        )
        return self._data(response)

    def _upload(self, job: dict[str, Any], input_path: Path) -> None:
        import_task = self._find_task(job, IMPORT_TASK)
        form = ((import_task or {}).get("result") or {}).get("form") or {}
        url = form.get("url")
        if not url:
            raise ConversionUploadTargetMissingError(
                f"CloudConvert job {job.get('id')} returned no upload form"
            )
        with input_path.open("rb") as fh:
            self._send(
                "POST",
                url,
                data=form.get("parameters") or {},
                files={"file": (input_path.name, fh)},
            )

    def _wait_for_job(self, job_id: str) -> dict[str, Any]:
        response = self._send(
            "GET", f"{self._sync_base_url}/jobs/{job_id}", headers=self._auth_headers()
        )
        job = self._data(response)
        if job.get("status") == "error":
            failed = [t for t in job.get("tasks", []) if t.get("status") == "error"]
            detail = "; ".join(
                f"{t.get('name')}: {t.get('message') or t.get('code')}" for t in failed
            )
            code = next((t.get("code") for t in failed if t.get("code")), None)
            if code in QUOTA_ERROR_CODES:
                raise ConversionQuotaExceededError(f"CloudConvert job {job_id} failed: {detail}")
            raise ConversionError(f"CloudConvert job {job_id} failed: {detail or 'unknown error'}")
        return job

    def _export_url(self, job: dict[str, Any]) -> str:
        export_task = self._find_task(job, EXPORT_TASK)
        files = ((export_task or {}).get("result") or {}).get("files") or []
        url = files[0].get("url") if files else None
        if not url:
            raise ConversionExportMissingError(
                f"CloudConvert job {job.get('id')} produced no export URL"
            )
        return str(url)

    def _download(self, url: str, output_path: Path) -> None:
        response = self._send("GET", url)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            output_path.write_bytes(response.content)
        except OSError as exc:
            raise ConversionError(f"Could not write {output_path}: {exc}") from exc

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ConversionError(f"CloudConvert request failed: {exc}") from exc
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code < 400:
            return
        code, message = CloudConvertClient._error_details(response)
        if response.status_code == 402 or code in QUOTA_ERROR_CODES:
            raise ConversionQuotaExceededError(f"CloudConvert quota exhausted: {message}")
        if response.status_code == 429:
            raise ConversionRateLimitedError(f"CloudConvert rate limit hit: {message}")
        raise ConversionError(
            f"CloudConvert returned HTTP {response.status_code}: {message}"
        )

    @staticmethod
    def _error_details(response: httpx.Response) -> tuple[str | None, str]:
        try:
            body = response.json()
        except ValueError:
            return None, response.text[:200]
        if not isinstance(body, dict):
            return None, str(body)[:200]
        return body.get("code"), str(body.get("message") or body)

    @staticmethod
    def _data(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            raise ConversionError(f"CloudConvert returned invalid JSON: {exc}") from exc
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise ConversionError("CloudConvert response has no 'data' object")
        return data

    @staticmethod
    def _find_task(job: dict[str, Any], name: str) -> dict[str, Any] | None:
        for task in job.get("tasks") or []:
            if task.get("name") == name:
                return task
        return None

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}
