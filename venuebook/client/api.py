import logging
import requests

logger = logging.getLogger(__name__)

"""
HTTP CLIENT FOR THE VENUEBOOK API

Thin wrapper over a requests session. Every call is a single attempt:
failures are raised as RemoteCallError and never retried.
"""


DEFAULT_TIMEOUT = 10


class RemoteCallError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


#Pull a human readable message out of an error response body
def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}"

    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message")
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list) and detail:
            return "; ".join(str(item.get("msg", item)) for item in detail)

    return f"Request failed with status {response.status_code}"


class ApiClient:
    """
    `http` may be any object with a requests-style `request()` method,
    which lets tests pass a FastAPI TestClient straight through.
    """

    def __init__(self, base_url: str = "", http=None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout
        self.token = None

    def _headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def request(self, method: str, path: str, *, json=None, params=None) -> dict:
        url = f"{self.base_url}{path}"

        try:
            response = self.http.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RemoteCallError(f"Could not reach the server: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            raise RemoteCallError(message, status_code=response.status_code)

        if not response.content:
            return {}
        return response.json()

    def get(self, path: str, **kwargs) -> dict:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> dict:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs) -> dict:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs) -> dict:
        return self.request("DELETE", path, **kwargs)
