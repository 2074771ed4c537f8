"""Errors raised by the pixelation pipeline.

Every error is terminal for the request that triggered it. The HTTP layer
maps all of them to a 400 response.
"""
from __future__ import annotations


class GrayblockError(Exception):
    """Base class for pipeline failures."""


class DecodeError(GrayblockError):
    """Input bytes are not a recognised or readable image."""


class InvalidDimensions(GrayblockError):
    """Block size exceeds the image width or height."""


class EncodeError(GrayblockError):
    """The output image could not be serialised."""


__all__ = ["GrayblockError", "DecodeError", "InvalidDimensions", "EncodeError"]
