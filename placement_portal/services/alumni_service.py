"""
Alumni Service
"""

from placement_portal.models.alumni import Alumni
from placement_portal.services.record_service import RecordService


class AlumniService(RecordService):
    """Service for alumni registrations"""

    model = Alumni
    label = "Alumni"
    required_fields = (
        "name",
        "roll_number",
        "pass_out_year",
        "address",
        "contact_number",
        "email",
    )
    order_by = ("-pass_out_year", "id")


alumni_service = AlumniService()
