from datetime import datetime, timedelta, timezone

from bizdirectory.crud import business as business_crud
from bizdirectory.crud import documents as documents_crud
from bizdirectory.schemas.business import BusinessCreate
from bizdirectory.schemas.document_transaction import DocumentTransactionCreate


def _business(db, tax_id="0312345678"):
    return business_crud.create_business(db, BusinessCreate(name="Hoàng Long", tax_id=tax_id))


def _transaction(**overrides):
    data = {"documentType": "Báo cáo tài chính", "transactionType": "nhận", "handledBy": "Anh Tuấn"}
    data.update(overrides)
    return DocumentTransactionCreate(**data)


def test_transaction_date_defaults_to_now(db):
    business = _business(db)
    before = datetime.now(timezone.utc).replace(tzinfo=None)

    created = documents_crud.create_document_transaction(db, business.id, _transaction())

    assert created.id is not None
    assert created.business_id == business.id
    assert created.transaction_type == "nhận"
    assert created.transaction_date.replace(tzinfo=None) >= before.replace(microsecond=0)
    assert created.created_at is not None


def test_explicit_transaction_date_is_kept(db):
    business = _business(db)
    created = documents_crud.create_document_transaction(
        db, business.id, _transaction(transactionDate="2024-03-15T09:30:00")
    )
    assert created.transaction_date.replace(tzinfo=None) == datetime(2024, 3, 15, 9, 30)


def test_list_by_business_newest_transaction_first(db):
    business = _business(db)
    other = _business(db, tax_id="0100000001")
    for day in (3, 10, 1):
        documents_crud.create_document_transaction(
            db, business.id, _transaction(transactionDate=f"2024-05-{day:02d}T00:00:00", notes=f"day {day}")
        )
    documents_crud.create_document_transaction(db, other.id, _transaction())

    transactions = documents_crud.list_document_transactions(db, business.id)

    assert [t.notes for t in transactions] == ["day 10", "day 3", "day 1"]


def test_list_for_business_without_transactions_is_empty(db):
    business = _business(db)
    assert documents_crud.list_document_transactions(db, business.id) == []
    assert documents_crud.list_document_transactions(db, 12345) == []


def test_delete_transaction(db):
    business = _business(db)
    created = documents_crud.create_document_transaction(db, business.id, _transaction())

    assert documents_crud.delete_document_transaction(db, created.id) is True
    assert documents_crud.get_document_transaction(db, created.id) is None
    assert documents_crud.delete_document_transaction(db, created.id) is False


def test_naive_transaction_date_is_read_as_utc():
    data = _transaction(transactionDate="2024-03-15T09:30:00")
    assert data.transaction_date == datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


def test_transaction_date_offset_is_kept():
    data = _transaction(transactionDate="2024-03-15T16:30:00+07:00")
    assert data.transaction_date.utcoffset() == timedelta(hours=7)
    assert data.transaction_date == datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)
