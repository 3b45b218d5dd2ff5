"""Locates the uncorrected latency subsection of a wrk2 report."""
from .constants import ReportConstants
from .exceptions import MissingSectionEndError, MissingSectionError


class SectionLocator:
    """Finds the bounds of the Uncorrected Latency section."""

    @staticmethod
    def locate(text: str) -> str:
        """
        Return the text between the Uncorrected Latency marker and its end boundary.

        The section ends at the first blank line or at the Detailed Percentile
        spectrum marker, whichever comes first. Neither marker is included in the
        returned fragment.

        Args:
            text: Complete wrk2 output.

        Returns:
            The section body.

        Raises:
            MissingSectionError: If the marker is absent.
            MissingSectionEndError: If no boundary follows the marker.
        """
        marker = ReportConstants.UNCORRECTED_LATENCY_MARKER
        marker_idx = text.find(marker)
        if marker_idx < 0:
            raise MissingSectionError("Could not find Uncorrected Latency section", marker)

        section_start = marker_idx + len(marker)
        boundaries = [
            idx for idx in (
                text.find(ReportConstants.BLANK_LINE, section_start),
                text.find(ReportConstants.DETAILED_SPECTRUM_MARKER, section_start),
            )
            if idx >= 0
        ]
        if not boundaries:
            raise MissingSectionEndError(
                "Could not find end of Uncorrected Latency section",
                f"blank line or {ReportConstants.DETAILED_SPECTRUM_MARKER!r}",
            )
        return text[section_start:min(boundaries)]
