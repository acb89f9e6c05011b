"""HTTP request pipeline for the NIU cloud API.

The pipeline sits on top of an ``httpx.AsyncClient``: it builds each request
with the language and session token headers, sends it, and turns the
response into an ApiResult or a classified NiuCloudError.

Example:
    ```python
    import httpx

    from niu_cloud_client.auth import SessionCredentialStore
    from niu_cloud_client.transport import RequestPipeline

    async with httpx.AsyncClient() as http_client:
        pipeline = RequestPipeline(http_client, SessionCredentialStore("T123"), base_url="https://app-api.niu.com")
        result = await pipeline.dispatch("/motoinfo/list", {}, operation="get_vehicles()")
    ```
"""

from niu_cloud_client.transport.pipeline import LANGUAGE_HEADER, TOKEN_HEADER, RequestPipeline

__all__ = ["LANGUAGE_HEADER", "TOKEN_HEADER", "RequestPipeline"]
