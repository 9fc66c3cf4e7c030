"""Request option building for SignNowClient."""

from ..models import ApiTarget, RequestIntent, TransportRequestOptions


def build_request_options(intent: RequestIntent, target: ApiTarget) -> TransportRequestOptions:
    """Turn a request intent into transport options for ``target``.

    The computed ``Authorization`` header replaces a caller header of
    the same name in any letter case.
    Content headers are left to the caller that owns the body.
    """
    authorization = intent.authorization.header_value()
    if authorization is None:
        headers = dict(intent.headers)
    else:
        headers = {name: value for name, value in intent.headers.items() if name.lower() != "authorization"}
        headers["Authorization"] = authorization
    return TransportRequestOptions(
        method=intent.method,
        url=f"https://{target.host.value}{target.base_path}{intent.path}",
        headers=headers,
        body=intent.body,
    )
