"""Alert to incident mapping."""

from snowhook.models.alert import Alert
from snowhook.models.incident import CALLER_ID, CONTACT_TYPE, IMPACT, URGENCY, Incident


def alert_to_incident(alert: Alert) -> Incident:
    """
    Build the ServiceNow incident for an alert.
    
    Never fails: labels or annotations the alert does not carry become empty
    strings, so a badly labelled alert still produces an incident.
    """
    return Incident(
        assignment_group=alert.labels.get("assignment_group", ""),
        contact_type=CONTACT_TYPE,
        caller_id=CALLER_ID,
        description=alert.annotations.get("description", ""),
        impact=IMPACT,
        short_description=alert.annotations.get("summary", ""),
        urgency=URGENCY,
    )
