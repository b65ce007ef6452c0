"""
Data Layer Exceptions
"""


class RecordNotFoundError(LookupError):
    """Raised when an update or delete targets a record that does not exist"""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")
