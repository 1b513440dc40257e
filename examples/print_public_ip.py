"""Ask Porkbun for this machine's public IP and report the outcome by error kind."""

from __future__ import annotations

import os

from dynapork import (
    APIError,
    Credentials,
    InvalidCredentialsError,
    PorkbunClient,
    ResponseDecodeError,
    WebRequestError,
)

API_KEY = os.getenv("PORKBUN_API_KEY", "")
API_SECRET = os.getenv("PORKBUN_SECRET_API_KEY", "")


def main() -> None:
    with PorkbunClient(Credentials(API_KEY, API_SECRET), log_level="debug") as client:
        result = client.request_ip_safe()

    if result.ok:
        print(f"Public IP: {result.data}")
    elif isinstance(result.error, InvalidCredentialsError):
        print("Porkbun rejected the API key; check PORKBUN_API_KEY and PORKBUN_SECRET_API_KEY")
    elif isinstance(result.error, APIError):
        print(f"Porkbun reported an error: {result.error.message}")
    elif isinstance(result.error, ResponseDecodeError):
        print("Porkbun answered with an unexpected payload")
    elif isinstance(result.error, WebRequestError):
        print(f"Network failure: {result.error.diagnostic}")


if __name__ == "__main__":
    main()
