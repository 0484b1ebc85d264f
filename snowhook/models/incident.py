"""
ServiceNow incident model.
"""

from pydantic import BaseModel, ConfigDict, Field

CONTACT_TYPE = "Monitoring System"
CALLER_ID = "Prometheus"
IMPACT = "4"
URGENCY = "3"


class Incident(BaseModel):
    """
    Incident record submitted to the ServiceNow ``incident`` table.
    
    Attribute names are the table's column names, so ``model_dump()`` is the
    request body as-is. All fields are strings and always present.
    """
    
    model_config = ConfigDict(frozen=True)
    
    assignment_group: str = Field(default="")
    contact_type: str = Field(default=CONTACT_TYPE)
    caller_id: str = Field(default=CALLER_ID)
    description: str = Field(default="")
    impact: str = Field(default=IMPACT)
    short_description: str = Field(default="")
    urgency: str = Field(default=URGENCY)
