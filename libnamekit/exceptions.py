class NameKitError(Exception):
    """Toolchain cannot be driven at all (e.g misconfigured), raised before any tool is spawned.

    Failures of tools themselves are never raised, these are returned as outcomes.
    """

    # One-line description, also used as `str()` of an error
    headline: str = "Toolchain cannot be used"

    # Stable identifier printed below the message (e.g `unsupported-platform`)
    code: str = "namekit-error"

    def describe(self) -> list[str]:
        """Lines with details and a way to fix the error."""
        return []

    def __str__(self) -> str:
        return self.headline

    def __repr__(self) -> str:
        sections = [f"{self.headline}!", "\n".join(self.describe()), f"[{self.code}]"]
        return "\n\n".join(s for s in sections if s)
