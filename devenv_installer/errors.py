"""Failure kinds raised by provisioning steps.

Whether a failure halts the run is decided by the step's ``fatal`` flag,
not by the exception type.
"""

from __future__ import annotations


class ProvisioningError(RuntimeError):
    """Base class for every condition a step reports to the pipeline."""


class InterpreterNotFound(ProvisioningError):
    pass


class EnvironmentCreationFailed(ProvisioningError):
    pass


class SyncFailed(ProvisioningError):
    pass


class NativeLibraryInstallFailed(ProvisioningError):
    pass


class ManifestNotFound(ProvisioningError):
    pass


class DependencyInstallFailed(ProvisioningError):
    pass


class ApplicationInstallFailed(ProvisioningError):
    pass


class InvalidSelection(ProvisioningError):
    pass


class UiInstallFailed(ProvisioningError):
    pass
