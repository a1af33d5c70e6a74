from __future__ import annotations

import math
from typing import Tuple

from flask import Blueprint, request, jsonify, g

from api.deps import get_storage
from models.transaction_store import TransactionStore
from models.schemas.transaction import TransactionCreateSchema, TransactionOutSchema
from utils.decorators import jwt_required
from utils.exceptions import NotFound

bp = Blueprint("transactions", __name__)

tx_create_schema = TransactionCreateSchema()
tx_list_out_schema = TransactionOutSchema(many=True)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _int_arg(name: str, default: int) -> int:
    try:
        value = int(request.args.get(name, ""))
    except ValueError:
        return default
    return value if value >= 1 else default


def parse_pagination() -> Tuple[int, int]:
    page = _int_arg("pagina", 1)
    limit = min(_int_arg("limite", DEFAULT_LIMIT), MAX_LIMIT)
    return page, limit


@bp.get("/transacoes")
@jwt_required()
def list_transactions():
    """
    List the caller's transactions, newest first, with page info and totals.
    Query: pagina (default 1), limite (default 10, max 100)
    """
    store = TransactionStore(get_storage())
    page, limit = parse_pagination()

    total, incoming, outgoing = store.summary(g.current_user_id)
    rows = store.list_page(g.current_user_id, page, limit)
    total_pages = math.ceil(total / limit)

    return jsonify(
        {
            "transacoes": tx_list_out_schema.dump(rows),
            "paginacao": {
                "paginaAtual": page,
                "limite": limit,
                "total": total,
                "totalPaginas": total_pages,
                "temProxima": page < total_pages,
                "temAnterior": page > 1,
            },
            "resumo": {
                "total": incoming - outgoing,
                "entradas": incoming,
                "saidas": outgoing,
            },
        }
    ), 200


@bp.post("/transacoes")
@jwt_required()
def create_transaction():
    """
    Record an income ("entrada") or expense ("saida"); valor is in cents.
    Body: { nome, valor, categoria, tipo }
    """
    payload = request.get_json(silent=True) or {}
    data = tx_create_schema.load(payload)

    tx_id = TransactionStore(get_storage()).create(
        g.current_user_id,
        name=data["name"],
        amount=data["amount"],
        category=data["category"],
        kind=data["kind"],
    )

    return jsonify({"mensagem": "Transação criada com sucesso", "id": tx_id}), 201


@bp.delete("/transacoes/<int:transaction_id>")
@jwt_required()
def delete_transaction(transaction_id: int):
    """Delete one of the caller's transactions; someone else's is a 404."""
    if not TransactionStore(get_storage()).delete(g.current_user_id, transaction_id):
        raise NotFound("Transação não encontrada")
    return jsonify({"mensagem": "Transação deletada com sucesso"}), 200
