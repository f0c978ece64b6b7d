from .step_10_locate_interpreter import LocateInterpreterStep
from .step_20_create_venv import CreateVenvStep
from .step_30_sync_source import SyncSourceStep
from .step_40_install_native_lib import InstallNativeLibStep
from .step_50_select_dependencies import SelectDependenciesStep
from .step_60_install_dependencies import InstallDependenciesStep
from .step_70_install_application import InstallApplicationStep
from .step_80_install_ui import InstallUiStep

__all__ = [
    "LocateInterpreterStep",
    "CreateVenvStep",
    "SyncSourceStep",
    "InstallNativeLibStep",
    "SelectDependenciesStep",
    "InstallDependenciesStep",
    "InstallApplicationStep",
    "InstallUiStep",
]
