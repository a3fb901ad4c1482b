from __future__ import annotations

from urllib.parse import quote, unquote, urlparse

import httpx

from treino.core.logging import get_logger


def file_name_from_url(url: str | None) -> str | None:
    """Último segmento do caminho da URL pública (ex.: .../treinos-pdf/abc.pdf -> abc.pdf)."""
    if not url:
        return None
    path = urlparse(url).path
    name = unquote(path.rstrip("/").split("/")[-1])
    return name or None


class StorageClient:
    """Cliente mínimo da API REST do Supabase Storage (service role)."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{self.base_url}/storage/v1",
            headers={
                "Authorization": f"Bearer {service_key}",
                "apikey": service_key,
            },
            timeout=timeout,
            transport=transport,
        )

    def remove(self, bucket: str, names: list[str]) -> bool:
        """
        Remove objetos do bucket. Falha do storage não impede a remoção do
        registro no banco: devolve False e registra no log.
        """
        if not names:
            return True
        log = get_logger().bind(bucket=bucket, names=names)
        try:
            resp = self._client.request("DELETE", f"/object/{bucket}", json={"prefixes": names})
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            log.warning("storage.remove_failed", error=str(exc))
            return False
        log.info("storage.removed")
        return True

    def create_signed_url(
        self, bucket: str, name: str, expires_in: int
    ) -> str | None:
        """URL assinada temporária para um objeto privado; None se o storage recusar."""
        log = get_logger().bind(bucket=bucket, name=name)
        try:
            resp = self._client.post(
                f"/object/sign/{bucket}/{quote(name)}", json={"expiresIn": expires_in}
            )
            resp.raise_for_status()
            signed = resp.json()["signedURL"]
        except (httpx.HTTPError, KeyError, ValueError) as exc:
            log.warning("storage.sign_failed", error=str(exc))
            return None
        return f"{self.base_url}/storage/v1{signed}"

    def close(self) -> None:
        self._client.close()
