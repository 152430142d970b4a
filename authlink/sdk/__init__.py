from authlink.sdk.client import IdentityClient

__all__ = ["IdentityClient"]
