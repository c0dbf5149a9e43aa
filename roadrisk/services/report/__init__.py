from roadrisk.services.report.generator import ReportGenerator

__all__ = ["ReportGenerator"]
