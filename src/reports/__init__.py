from .export import (
    export_average_gaps_csv,
    export_reports,
    export_short_infos_csv,
    export_status_counts_csv,
)

__all__ = [
    "export_short_infos_csv",
    "export_average_gaps_csv",
    "export_status_counts_csv",
    "export_reports",
]
