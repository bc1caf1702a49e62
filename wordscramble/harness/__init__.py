from .survey import survey_root, run_survey
from .io import write_csv, write_manifest

__all__ = ["survey_root", "run_survey", "write_csv", "write_manifest"]
