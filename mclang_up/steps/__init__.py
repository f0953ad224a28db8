from .step_10_check_dependencies import CheckDependenciesStep
from .step_20_prepare_layout import PrepareLayoutStep
from .step_25_clean_components import CleanComponentsStep
from .step_30_install_components import InstallComponentsStep
from .step_35_update_components import UpdateComponentsStep
from .step_40_stage_binaries import StageBinariesStep
from .step_45_stage_stdlib import StageStdlibStep
from .step_90_path_hint import PathHintStep

__all__ = [
    "CheckDependenciesStep",
    "PrepareLayoutStep",
    "CleanComponentsStep",
    "InstallComponentsStep",
    "UpdateComponentsStep",
    "StageBinariesStep",
    "StageStdlibStep",
    "PathHintStep",
]
