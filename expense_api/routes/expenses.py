"""
Expense routes. Every query is scoped to the caller's user id, which is the
only authorization check: another user's row simply never matches.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_api.db import get_db
from expense_api.errors import NotFound, StorageFailure
from expense_api.models import Expense
from expense_api.schemas import Ack, ExpenseIn, ExpenseOut, Summary, TokenClaims
from expense_api.security import current_claims

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _owned(db: Session, exp_id: int, user_id: int):
    return db.query(Expense).filter(Expense.id == exp_id, Expense.user_id == user_id)


# claims is declared before db in every route so a rejected token never opens a session


@router.get("", response_model=list[ExpenseOut], include_in_schema=False)
@router.get("/", response_model=list[ExpenseOut])
def list_expenses(claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)):
    try:
        return db.query(Expense).filter(Expense.user_id == claims.user_id).order_by(Expense.date.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error fetching expenses for user %s", claims.user_id)
        raise StorageFailure("Failed to fetch expenses")


@router.get("/summary", response_model=Summary)
def summary(claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(Expense.category, func.sum(Expense.amount))
            .filter(Expense.user_id == claims.user_id)
            .group_by(Expense.category)
            .order_by(Expense.category)
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error summarizing expenses for user %s", claims.user_id)
        raise StorageFailure("Failed to summarize expenses")
    data = [float(r[1] or 0) for r in rows]
    return {"labels": [r[0] for r in rows], "data": data, "total": round(sum(data), 2)}


@router.post("", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
def add_expense(body: ExpenseIn, claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)):
    exp = Expense(**body.model_dump(), user_id=claims.user_id)
    try:
        db.add(exp)
        db.commit()
        db.refresh(exp)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding expense for user %s", claims.user_id)
        raise StorageFailure("Failed to add expense")
    logger.info("Expense %s created for user %s", exp.id, claims.user_id)
    return exp


@router.put("/{exp_id}", response_model=ExpenseOut)
def update_expense(
    exp_id: int,
    body: ExpenseIn,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    try:
        # single scoped UPDATE; updated_at is set even when nothing else changed
        matched = _owned(db, exp_id, claims.user_id).update(
            {**body.model_dump(), "updated_at": func.now()},
            synchronize_session=False,
        )
        db.commit()
        if matched == 0:
            raise NotFound()
        exp = _owned(db, exp_id, claims.user_id).first()
        if not exp:
            raise NotFound()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating expense %s for user %s", exp_id, claims.user_id)
        raise StorageFailure("Failed to update expense")
    logger.info("Expense %s updated for user %s", exp_id, claims.user_id)
    return exp


@router.delete("/{exp_id}", response_model=Ack)
def delete_expense(exp_id: int, claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)):
    try:
        deleted = _owned(db, exp_id, claims.user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error deleting expense %s for user %s", exp_id, claims.user_id)
        raise StorageFailure("Failed to delete expense")
    if deleted == 0:
        raise NotFound()
    logger.info("Expense %s deleted for user %s", exp_id, claims.user_id)
    return {"success": True}
