from .step_10_preconditions import PreconditionsStep
from .step_20_select_disk import SelectDiskStep
from .step_30_partition_disk import PartitionDiskStep
from .step_35_assign_partitions import AssignPartitionsStep
from .step_40_format import FormatPartitionsStep
from .step_50_mount import MountFilesystemsStep
from .step_60_base_install import InstallBaseStep
from .step_70_fstab import GenerateFstabStep
from .step_80_chroot_config import ChrootConfigureStep
from .step_90_finalize import RebootStep, UnmountStep

__all__ = [
    "PreconditionsStep",
    "SelectDiskStep",
    "PartitionDiskStep",
    "AssignPartitionsStep",
    "FormatPartitionsStep",
    "MountFilesystemsStep",
    "InstallBaseStep",
    "GenerateFstabStep",
    "ChrootConfigureStep",
    "UnmountStep",
    "RebootStep",
]
