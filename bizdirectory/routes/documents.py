import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bizdirectory.core.dependencies import require_admin
from bizdirectory.core.sessions import AdminIdentity
from bizdirectory.crud import business as business_crud
from bizdirectory.crud import documents as documents_crud
from bizdirectory.database import get_db
from bizdirectory.schemas.auth import MessageResponse
from bizdirectory.schemas.document_transaction import DocumentTransactionCreate, DocumentTransactionResponse

router = APIRouter(tags=["documents"])
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@router.post(
    "/businesses/{business_id}/documents",
    response_model=DocumentTransactionResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_document_transaction(
    business_id: int,
    transaction_data: DocumentTransactionCreate,
    db: Session = Depends(get_db)
):
    """Record a document hand-off (giao) or receipt (nhận) for a business"""
    try:
        if not business_crud.get_business(db, business_id):
            logger.warning(f"Document transaction for unknown business {business_id}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy doanh nghiệp")

        transaction = documents_crud.create_document_transaction(db, business_id, transaction_data)
        logger.info(
            f"Document transaction {transaction.id} ({transaction.transaction_type} {transaction.document_type}) "
            f"recorded for business {business_id}"
        )
        return transaction
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating document transaction: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tạo giao dịch hồ sơ"
        )


@router.get("/businesses/{business_id}/documents", response_model=List[DocumentTransactionResponse])
async def list_document_transactions(business_id: int, db: Session = Depends(get_db)):
    """Document history of a business, most recent first"""
    try:
        return documents_crud.list_document_transactions(db, business_id)
    except Exception as e:
        logger.error(f"Unexpected error fetching document transactions: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tải lịch sử giao nhận hồ sơ"
        )


@router.delete("/documents/{transaction_id}", response_model=MessageResponse)
async def delete_document_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin("Cần quyền admin để xóa"))
):
    """Delete a document transaction - admin only"""
    try:
        if not documents_crud.delete_document_transaction(db, transaction_id):
            logger.warning(f"Document transaction with ID {transaction_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy giao dịch hồ sơ")

        logger.info(f"Admin {admin.username} deleted document transaction {transaction_id}")
        return {"message": "Xóa giao dịch hồ sơ thành công"}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error deleting document transaction: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi xóa giao dịch hồ sơ"
        )
