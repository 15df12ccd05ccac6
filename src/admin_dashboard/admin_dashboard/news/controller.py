from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import int_arg, json_body
from ..container import Container
from ..core.exceptions import ValidationError
from .model import NewsItem


def news_json(n: NewsItem) -> dict:
    return {
        "id": n.news_id,
        "url": n.url,
        "title": n.title,
        "publishDate": n.publish_date,
        "estado": int(n.estado),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/news", methods=["GET", "POST"], endpoint="news")
    def news():
        svc = container.news_service

        if request.method == "POST":
            item = svc.create(json_body())
            return jsonify({"message": "News item added", "item": news_json(item)}), 201

        page = int_arg("page")
        limit = int_arg("limit")
        if page is None and limit is None:
            return jsonify([news_json(n) for n in svc.list_all()])

        result = svc.list_page(page=page, limit=limit)
        return jsonify(
            {
                "items": [news_json(n) for n in result.items],
                "page": result.page,
                "limit": result.limit,
                "hasMore": result.has_more,
            }
        )

    @app.route("/news/<int:news_id>", methods=["DELETE", "PATCH", "PUT"], endpoint="news_detail")
    def news_detail(news_id: int):
        svc = container.news_service

        if request.method == "DELETE":
            svc.delete(news_id)
            return jsonify({"message": "News item deleted"})

        if request.method == "PUT":
            item = svc.update(news_id, json_body())
            return jsonify({"message": "News item updated", "item": news_json(item)})

        body = json_body()
        if body is not None and not isinstance(body, dict):
            raise ValidationError("request body must be a JSON object")
        if body and "estado" in body:
            estado = svc.set_estado(news_id, body)
            return jsonify({"message": "News item status updated", "estado": int(estado)})

        item = svc.toggle_estado(news_id)
        return jsonify({"message": "News item status updated", "estado": int(item.estado)})
