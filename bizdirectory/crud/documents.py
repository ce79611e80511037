from typing import List, Optional

from sqlalchemy.orm import Session

from bizdirectory.models.business import utcnow
from bizdirectory.models.document_transaction import DocumentTransaction
from bizdirectory.schemas.document_transaction import DocumentTransactionCreate


def create_document_transaction(db: Session, business_id: int, data: DocumentTransactionCreate) -> DocumentTransaction:
    values = data.model_dump()
    if values.get("transaction_date") is None:
        values["transaction_date"] = utcnow()
    transaction = DocumentTransaction(business_id=business_id, **values)
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    return transaction


def list_document_transactions(db: Session, business_id: int) -> List[DocumentTransaction]:
    return (
        db.query(DocumentTransaction)
        .filter(DocumentTransaction.business_id == business_id)
        .order_by(DocumentTransaction.transaction_date.desc(), DocumentTransaction.id.desc())
        .all()
    )


def get_document_transaction(db: Session, transaction_id: int) -> Optional[DocumentTransaction]:
    return db.query(DocumentTransaction).filter(DocumentTransaction.id == transaction_id).first()


def delete_document_transaction(db: Session, transaction_id: int) -> bool:
    transaction = get_document_transaction(db, transaction_id)
    if transaction is None:
        return False
    db.delete(transaction)
    db.commit()
    return True
