"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "assetstash"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ assetstash",
    "     // content-addressed build artifacts",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} asset writer"))
