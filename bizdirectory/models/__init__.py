# package marker for bizdirectory.models

# Import all models to ensure relationships are properly initialized
from bizdirectory.models.business import Business
from bizdirectory.models.document_transaction import DocumentTransaction
from bizdirectory.models.admin_user import AdminUser

__all__ = [
    "Business",
    "DocumentTransaction",
    "AdminUser"
]
