"""licident: content-addressed identity for license text."""

from licident.core.license import License
from licident.core.urls import LicenseURL

__all__ = ["License", "LicenseURL"]
