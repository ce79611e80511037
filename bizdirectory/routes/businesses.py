import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from bizdirectory.core.dependencies import require_admin
from bizdirectory.core.errors import ConstraintViolation
from bizdirectory.core.security import check_delete_password
from bizdirectory.core.sessions import AdminIdentity
from bizdirectory.crud import business as business_crud
from bizdirectory.crud import search as search_crud
from bizdirectory.database import get_db
from bizdirectory.schemas.auth import MessageResponse
from bizdirectory.schemas.business import (
    BusinessCreate,
    BusinessDelete,
    BusinessPage,
    BusinessResponse,
    BusinessSearch,
    BusinessUpdate,
)

router = APIRouter(tags=["businesses"])
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Không tìm thấy doanh nghiệp"
DUPLICATE_TAX_ID_MESSAGE = "Mã số thuế đã tồn tại"


@router.get("", response_model=BusinessPage)
async def list_businesses(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Paginated business list, newest first - public access"""
    try:
        page_number = business_crud.parse_page_param(page, business_crud.DEFAULT_PAGE)
        page_size = business_crud.parse_page_param(limit, business_crud.DEFAULT_LIMIT)
        businesses, total = business_crud.list_businesses(db, page_number, page_size)
        return {"businesses": businesses, "total": total}
    except Exception as e:
        logger.error(f"Unexpected error fetching businesses: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tải danh sách doanh nghiệp"
        )


@router.get("/{business_id}", response_model=BusinessResponse)
async def get_business(business_id: int, db: Session = Depends(get_db)):
    """Get one business - public access"""
    try:
        business = business_crud.get_business(db, business_id)
        if not business:
            logger.warning(f"Business with ID {business_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
        return business
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error fetching business {business_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tải thông tin doanh nghiệp"
        )


@router.post("", response_model=BusinessResponse, status_code=status.HTTP_201_CREATED)
async def create_business(business_data: BusinessCreate, db: Session = Depends(get_db)):
    """Create a business - public access, tax ID must be unique"""
    try:
        business = business_crud.create_business(db, business_data)
        logger.info(f"Business created successfully: {business.name} (ID: {business.id}, tax ID: {business.tax_id})")
        return business
    except ConstraintViolation:
        logger.warning(f"Duplicate tax ID rejected: {business_data.tax_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_TAX_ID_MESSAGE)
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating business: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tạo doanh nghiệp mới"
        )


@router.put("/{business_id}", response_model=BusinessResponse)
async def update_business(
    business_id: int,
    business_data: BusinessUpdate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(require_admin())
):
    """Update a business - admin only, omitted fields are left untouched"""
    try:
        update_data = business_data.model_dump(exclude_unset=True)
        for required in ("name", "tax_id"):
            if required in update_data and update_data[required] is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Dữ liệu không hợp lệ"
                )

        logger.info(f"Admin {admin.username} is updating business {business_id}")
        business = business_crud.update_business(db, business_id, business_data)
        if not business:
            logger.warning(f"Business with ID {business_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)

        logger.info(f"Business updated successfully: {business.name} (ID: {business.id})")
        return business
    except HTTPException:
        raise
    except ConstraintViolation:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_TAX_ID_MESSAGE)
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error updating business {business_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi cập nhật doanh nghiệp"
        )


@router.post("/search", response_model=List[BusinessResponse])
async def search_businesses(search: BusinessSearch, db: Session = Depends(get_db)):
    """Search by one field, exact or partial depending on the field - public access"""
    try:
        businesses = search_crud.search_businesses(db, search.field.value, search.value)
        logger.info(f"Search on {search.field.value} returned {len(businesses)} businesses")
        return businesses
    except Exception as e:
        logger.error(f"Unexpected error searching businesses: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi tìm kiếm doanh nghiệp"
        )


@router.delete("/{business_id}", response_model=MessageResponse)
async def delete_business(business_id: int, delete_data: BusinessDelete, db: Session = Depends(get_db)):
    """Delete a business and its document history - requires the shared delete password"""
    try:
        if not check_delete_password(delete_data.password):
            logger.warning(f"Wrong delete password for business {business_id}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Mật khẩu không đúng")

        if not business_crud.delete_business(db, business_id):
            logger.warning(f"Business with ID {business_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)

        logger.info(f"Business {business_id} deleted successfully")
        return {"message": "Xóa doanh nghiệp thành công"}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error deleting business {business_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lỗi khi xóa doanh nghiệp"
        )
