from satin_sim.reporting.report import (
    Clock,
    LaserReport,
    render_footer,
    render_header,
    render_row,
)

__all__ = ["Clock", "LaserReport", "render_footer", "render_header", "render_row"]
