"""
Bionic Scaffolding

Project discovery, text patching and the setup orchestrator.
"""

from bionic.scaffold.orchestrator import SetupOrchestrator
from bionic.scaffold.topology import scan
from bionic.scaffold.ui import ScaffoldUI

__all__ = ["SetupOrchestrator", "ScaffoldUI", "scan"]
