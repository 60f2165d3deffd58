"""Human-readable report formatting for auto-fit results."""

from newsfit.config import FIT_TOLERANCE, MAX_ITERATIONS
from newsfit.layout.locator import ArticleLayout
from newsfit.pipeline.autofit import FitOutcome, FitStatus
from newsfit.pipeline.adjuster import count_words


def format_layout_report(layout: ArticleLayout, frame_name: str) -> str:
    """Format detected slots as a readable CLI report."""

    def _found(ok: bool) -> str:
        return "FOUND" if ok else " --  "

    summary = layout.summary()
    lines = [
        f"{'='*60}",
        f"LAYOUT: {frame_name}",
        f"{'='*60}",
        f"  [{_found(summary['has_headline'])}] Headline",
        f"  [{_found(summary['has_title'])}] Title",
        f"  [{_found(summary['has_subtitle'])}] Subtitle",
        f"  [{_found(summary['has_source'])}] Source",
        f"  [{_found(summary['has_url'])}] URL",
        f"  Body columns: {summary['column_count']}",
    ]
    for i, column in enumerate(layout.columns, 1):
        lines.append(f"    {i}. x={column.x:.0f}  {column.width:.0f}x{column.height:.0f}")
    if not layout.columns:
        lines.append("\nNo body columns detected in this frame")
    lines.append(f"{'='*60}")
    return "\n".join(lines)


def format_fit_report(outcome: FitOutcome, frame_name: str) -> str:
    """Format an auto-fit outcome as a readable CLI report."""
    status_label = {
        FitStatus.CONVERGED: "PASS",
        FitStatus.MAX_ITERATIONS_REACHED: "WARN",
        FitStatus.FAILED: "FAIL",
    }[outcome.status]

    lines = [
        f"{'='*60}",
        f"AUTO-FIT REPORT: {frame_name}",
        f"{'='*60}",
        f"Result: {outcome.status.value}",
        "",
        f"  [{status_label}] Overflow:    {outcome.overflow:+.1f}  (tolerance: ±{FIT_TOLERANCE:g})",
        f"  Iterations:        {outcome.iterations}  (max: {MAX_ITERATIONS})",
        f"  Rewrite calls:     {outcome.adjust_calls}",
        f"  Body word count:   {count_words(outcome.body)}",
    ]

    if outcome.status == FitStatus.MAX_ITERATIONS_REACHED:
        lines.append("\nMax iterations reached; last rewrite left in place.")
        if outcome.overflow > 0:
            lines.append("  ~ Text still overflows the last column")
        else:
            lines.append("  ~ Last column still has spare room")
    elif outcome.status == FitStatus.FAILED:
        lines.append(f"\nERROR: {outcome.error}")
    else:
        lines.append("\nArticle fits its columns!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
