"""
Framework-agnostic emission entry workflow: wizard state machine, query cache
and API client.
"""
from carbon_aegis.workflow.client import CarbonAegisClient, caller_headers
from carbon_aegis.workflow.entry_workflow import EmissionEntryWorkflow, Notification
from carbon_aegis.workflow.query_cache import QueryCache, QueryKey
from carbon_aegis.workflow.wizard import EmissionEntryWizard, WizardState

__all__ = [
    "CarbonAegisClient",
    "EmissionEntryWizard",
    "EmissionEntryWorkflow",
    "Notification",
    "QueryCache",
    "QueryKey",
    "WizardState",
    "caller_headers",
]
