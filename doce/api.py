"""Ranking service client: configuration, result upload and ranking queries."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass

DEFAULT_CONFIG_PATH = "configuracionesApi.txt"
TIMEOUT = 30


class ApiError(Exception):
    """Raised when the configuration or the service cannot be used."""


@dataclass(frozen=True)
class ApiConfig:
    """Service endpoint and the group code that scopes the ranking."""

    url: str
    group_code: str


def read_config(path: str = DEFAULT_CONFIG_PATH) -> ApiConfig:
    """Read ``url|group_code`` from the first line of ``path``."""
    try:
        with open(path, encoding="utf-8") as fh:
            line = fh.readline()
    except OSError as exc:
        raise ApiError(f"cannot open configuration file {path}: {exc}") from exc
    url, sep, code = line.rstrip("\r\n").rpartition("|")
    if not sep:
        raise ApiError(f"malformed configuration line in {path}")
    return ApiConfig(url=url, group_code=code)


def result_payload(config: ApiConfig, name: str, won: int) -> str:
    """JSON body announcing a player's result."""
    payload = {
        "codigoGrupo": config.group_code,
        "jugador": {"nombre": name, "vencedor": int(won)},
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def ranking_url(config: ApiConfig) -> str:
    """URL of the group's ranking."""
    return f"{config.url}/{config.group_code}"


def _unverified_context() -> ssl.SSLContext:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def _request(
    url: str,
    method: str,
    data: bytes | None = None,
    headers: dict[str, str] | None = None,
) -> str:
    request = urllib.request.Request(
        url, data=data, method=method, headers=headers or {}
    )
    try:
        with urllib.request.urlopen(
            request, context=_unverified_context(), timeout=TIMEOUT
        ) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise ApiError(f"{method} {url} failed: {exc}") from exc
    return body.decode("utf-8", errors="replace")


def send_result(config: ApiConfig, name: str, won: int) -> str:
    """POST a result to the service; return the response body."""
    body = result_payload(config, name, won).encode("utf-8")
    return _request(
        config.url, "POST", body, {"Content-Type": "application/json"}
    )


def fetch_ranking(config: ApiConfig) -> str:
    """GET the group's ranking; return the response body."""
    return _request(ranking_url(config), "GET")


def delete_ranking(config: ApiConfig) -> str:
    """DELETE the group's ranking; return the response body."""
    return _request(ranking_url(config), "DELETE")