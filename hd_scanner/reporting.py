import logging

from .models import AssetResult, Outcome, ScanSummary


def format_result(asset: AssetResult) -> str:
    """One advisory line per processed asset."""
    result = asset.result
    if result.outcome is Outcome.COMPLIANT:
        return f"File {asset.path.name} is recommended HD format!"
    if result.outcome is Outcome.NON_COMPLIANT:
        return f"File {asset.path.name} is not recommended HD format: {result.reason}"
    return f"Failed to parse {asset.path}: {result.reason}"


def log_result(asset: AssetResult):
    level = logging.INFO if asset.result.is_compliant else logging.WARNING
    logging.log(level, format_result(asset))


def log_summary(summary: ScanSummary):
    counts = summary.counts
    logging.info(
        f"Scan of {summary.root} complete. {summary.total} assets: "
        f"{counts[Outcome.COMPLIANT]} compliant, "
        f"{counts[Outcome.NON_COMPLIANT]} not compliant, "
        f"{counts[Outcome.PROBE_FAILED]} failed to parse."
    )
