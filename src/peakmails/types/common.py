from typing import Callable, Optional, TypedDict


OriginProvider = Callable[[], Optional[str]]


class SDKOptionsType(TypedDict, total=False):
    apiKey: str
    domain: str
    projectId: str  # required for the signed profile
    secretKey: str  # marks a trusted backend caller
    originProvider: OriginProvider  # returns the caller's origin, e.g. "https://shop.example.com"
    timeout: float
