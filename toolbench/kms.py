"""Client for a key-management and cryptography service spoken to over JSON/HTTP.

Every request body is ``{"data": {...}}``; every reply carries a ``code``
(``20000`` on success) and a ``data`` object. Binary values travel as
standard Base64 text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from toolbench.base64codec import Base64Error, decode_base64, encode_base64

MAX_ALIAS_LEN = 64
SUCCESS_CODE = 20000
DEFAULT_BASE_URL = "http://127.0.0.1:8080"


class KmsError(Exception):
    """Raised when the service cannot be reached or reports a failure."""

    def __init__(self, message: str, code: Any = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class Key:
    """A key held by the service, named by alias and version.

    An empty alias asks the service to choose one on import.
    """

    alias: str = ""
    version: int = 0

    def __post_init__(self) -> None:
        if len(self.alias) > MAX_ALIAS_LEN - 1:
            raise ValueError(
                f"alias of {len(self.alias)} characters exceeds {MAX_ALIAS_LEN - 1}"
            )


def _require_alias(key: Key) -> None:
    if not key.alias:
        raise KmsError("key has no alias")


class KmsClient:
    """Calls the service's key-management and cryptographic endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "KmsClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _call(self, method: str, path: str, payload: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        """Send one request; return the reply's code and data object."""
        try:
            response = self._session.request(
                method,
                self.base_url + path,
                json={"data": payload},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise KmsError(f"request to {path} failed: {exc}") from exc
        if response.status_code != 200:
            raise KmsError(f"request to {path} returned HTTP {response.status_code}")
        try:
            body = response.json()
        except ValueError as exc:
            raise KmsError(f"reply from {path} is not JSON") from exc
        if not isinstance(body, dict):
            raise KmsError(f"reply from {path} is not a JSON object")
        data = body.get("data")
        return body.get("code"), data if isinstance(data, dict) else {}

    def _request(self, method: str, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        code, data = self._call(method, path, payload)
        if code != SUCCESS_CODE:
            raise KmsError(f"request to {path} failed with code {code}", code=code)
        return data

    @staticmethod
    def _text(data: dict[str, Any], name: str) -> str:
        value = data.get(name)
        if not isinstance(value, str):
            raise KmsError(f"reply is missing the text field {name!r}")
        return value

    @classmethod
    def _binary(cls, data: dict[str, Any], name: str) -> bytes:
        try:
            return decode_base64(cls._text(data, name))
        except Base64Error as exc:
            raise KmsError(f"field {name!r} is not valid Base64: {exc}") from exc

    def init_req_a(self, user_id: str, init_req_a_data: str) -> str:
        """Send the first handshake message; return the service's answer."""
        data = self._request(
            "POST",
            "/api/v1/15843/parse/initReqA",
            {"userId": user_id, "initReqAData": init_req_a_data},
        )
        return self._text(data, "initRespBData")

    def auth_req_a(self, user_id: str, init_auth_a_data: str) -> str:
        """Send the authentication handshake message; return the answer."""
        data = self._request(
            "POST",
            "/api/v1/15843/parse/authReqA",
            {"userId": user_id, "initReqAData": init_auth_a_data},
        )
        return self._text(data, "authRespBData")

    def import_symm_key(
        self, key: Key, period: int, symm_alg: str, length: int, secret_key: bytes
    ) -> Key:
        """Import a symmetric key of ``length`` bits; store the assigned alias in ``key``."""
        key_len = length // 8
        if len(secret_key) < key_len:
            raise ValueError(
                f"secret key holds {len(secret_key)} bytes, {key_len} needed for {length} bits"
            )
        data = self._request(
            "POST",
            "/api/v1/kms/key/import",
            {
                "alias": key.alias or None,
                "version": key.version,
                "period": period,
                "symmAlg": symm_alg,
                "length": length,
                "base64SecretKey": encode_base64(bytes(secret_key[:key_len])),
            },
        )
        alias = self._text(data, "alias")
        if not alias or len(alias) > MAX_ALIAS_LEN - 1:
            raise KmsError(f"service returned an unusable alias of {len(alias)} characters")
        key.alias = alias
        return key

    def _key_state(self, path: str, key: Key) -> None:
        _require_alias(key)
        self._request("PUT", path, {"alias": key.alias, "version": key.version})

    def delete_key(self, key: Key) -> None:
        """Revoke the key."""
        self._key_state("/api/v1/kms/key/revoke", key)

    def enable_key(self, key: Key) -> None:
        """Enable the key."""
        self._key_state("/api/v1/kms/key/enable", key)

    def disable_key(self, key: Key) -> None:
        """Disable the key."""
        self._key_state("/api/v1/kms/key/disable", key)

    def get_random(self, length: int) -> bytes:
        """Fetch ``length`` random bytes from the service."""
        data = self._request("POST", "/api/v1/crypto/random", {"length": length})
        random_bytes = self._binary(data, "random")
        if len(random_bytes) > length:
            raise KmsError(
                f"service returned {len(random_bytes)} random bytes, at most {length} expected"
            )
        return random_bytes

    def hash(self, alg: str, data: bytes) -> bytes:
        """Digest ``data`` with the named algorithm."""
        reply = self._request(
            "POST", "/api/v1/crypto/hash", {"alg": alg, "data": encode_base64(data)}
        )
        return self._binary(reply, "hashValue")

    def hmac(self, key: Key, hmac_alg: str, data: bytes) -> bytes:
        """Compute a keyed MAC of ``data``."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/hmac",
            {
                "alias": key.alias,
                "version": key.version,
                "hmacAlg": hmac_alg,
                "data": encode_base64(data),
            },
        )
        return self._binary(reply, "hmacValue")

    def sm4_encrypt(self, key: Key, padding_mode: str, data: bytes, iv: bytes) -> bytes:
        """Encrypt ``data`` with a symmetric key."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/encrypt",
            {
                "alias": key.alias,
                "version": key.version,
                "paddingMode": padding_mode,
                "base64PlainData": encode_base64(data),
                "base64Iv": encode_base64(iv),
            },
        )
        return self._binary(reply, "base64CipherData")

    def sm4_decrypt(self, key: Key, padding_mode: str, cipher_data: bytes, iv: bytes) -> bytes:
        """Decrypt ``cipher_data`` with a symmetric key."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/decrypt",
            {
                "alias": key.alias,
                "version": key.version,
                "paddingMode": padding_mode,
                "base64CipherData": encode_base64(cipher_data),
                "base64Iv": encode_base64(iv),
            },
        )
        return self._binary(reply, "base64PlainData")

    def sign(self, key: Key, sign_alg: str, data: bytes) -> bytes:
        """Sign ``data``; return the signature."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/sign",
            {
                "alias": key.alias,
                "version": key.version,
                "signAlg": sign_alg,
                "base64PlainData": encode_base64(data),
            },
        )
        return self._binary(reply, "base64SignData")

    def verify(self, key: Key, sign_alg: str, data: bytes, signature: bytes) -> bool:
        """Ask the service whether ``signature`` is valid for ``data``."""
        code, _ = self._call(
            "POST",
            "/api/v1/crypto/verify",
            {
                "alias": key.alias,
                "version": key.version,
                "signAlg": sign_alg,
                "base64PlainData": encode_base64(data),
                "base64SignData": encode_base64(signature),
            },
        )
        return code == SUCCESS_CODE

    def asym_encrypt(self, key: Key, enc_alg: str, data: bytes) -> bytes:
        """Encrypt ``data`` with an asymmetric key."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/encrypt",
            {
                "alias": key.alias,
                "version": key.version,
                "encAlg": enc_alg,
                "base64PlainData": encode_base64(data),
            },
        )
        return self._binary(reply, "base64CipherData")

    def asym_decrypt(self, key: Key, enc_alg: str, cipher_data: bytes) -> bytes:
        """Decrypt ``cipher_data`` with an asymmetric key."""
        reply = self._request(
            "POST",
            "/api/v1/crypto/decrypt",
            {
                "alias": key.alias,
                "version": key.version,
                "encAlg": enc_alg,
                "base64CipherData": encode_base64(cipher_data),
            },
        )
        return self._binary(reply, "base64PlainData")