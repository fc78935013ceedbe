# -*- coding: utf-8 -*-
"""Test doubles shared by the test modules."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from fastapi import Depends, FastAPI, HTTPException, Request

from myfood.food.models import DeleteFoodRequest


class FakeClock:
    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingDisplay:
    def __init__(self) -> None:
        self.shown: List[Tuple[str, str]] = []

    def show(self, category: str, message: str) -> None:
        self.shown.append((category, message))


DEFAULT_FOODS: Dict[str, dict] = {
    "apple": {
        "name": "Apple",
        "brand": "Garden",
        "cal100": 52.0,
        "prot100": 0.3,
        "fat100": 0.2,
        "carb100": 13.8,
        "comment": "green",
    },
    "oats": {
        "name": "Oats",
        "brand": "Mill",
        "cal100": 389.0,
        "prot100": 16.9,
        "fat100": 6.9,
        "carb100": 66.3,
        "comment": "",
    },
}


def create_food_api(foods: Optional[Dict[str, dict]] = None) -> FastAPI:
    """In-memory stand-in for the food REST API.

    `app.state.server_error` makes every route answer HTTP 500,
    `app.state.delete_error` makes delete answer with an application error.
    """
    app = FastAPI(title="myfood stub API")
    app.state.foods = {k: dict(v) for k, v in (foods if foods is not None else DEFAULT_FOODS).items()}
    app.state.server_error = False
    app.state.delete_error = ""
    app.state.deleted = []

    def _check_server(request: Request) -> None:
        if request.app.state.server_error:
            raise HTTPException(status_code=500, detail="Internal Server Error")

    @app.get("/food/api/list", dependencies=[Depends(_check_server)])
    def list_foods() -> dict:
        data = [
            {
                "key": key,
                "name": f["name"],
                "brand": f["brand"],
                "cal100": f["cal100"],
                "comment": f["comment"],
            }
            for key, f in sorted(app.state.foods.items())
        ]
        return {"error": "", "data": data}

    @app.get("/food/api/get/{key}", dependencies=[Depends(_check_server)])
    def get_food(key: str) -> dict:
        food = app.state.foods.get(key)
        if food is None:
            return {"error": "Food not found", "data": None}
        return {"error": "", "data": {"key": key, **food}}

    @app.post("/food/api/del", dependencies=[Depends(_check_server)])
    def delete_food(request: DeleteFoodRequest) -> dict:
        if app.state.delete_error:
            return {"error": app.state.delete_error, "data": None}
        app.state.foods.pop(request.key, None)
        app.state.deleted.append(request.key)
        return {"error": "", "data": "ok"}

    return app
