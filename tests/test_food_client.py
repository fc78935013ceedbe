# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

import httpx
from fastapi.testclient import TestClient

from myfood.food.client import FoodApiClient, FoodApiError, FoodRequestError, FoodTransportError
from tests.helpers import create_food_api


class TestFoodApiClient(unittest.TestCase):
    def setUp(self) -> None:
        self.api = create_food_api()
        self.http = TestClient(self.api)
        self.client = FoodApiClient("http://testserver", http=self.http)

    def tearDown(self) -> None:
        self.client.close()
        self.http.close()

    def test_list_foods(self) -> None:
        foods = self.client.list_foods()
        self.assertEqual([f.key for f in foods], ["apple", "oats"])
        self.assertEqual(foods[0].name, "Apple")
        self.assertEqual(foods[0].cal100, 52.0)
        self.assertEqual(foods[0].comment, "green")

    def test_list_foods_empty(self) -> None:
        self.api.state.foods.clear()
        self.assertEqual(self.client.list_foods(), [])

    def test_get_food(self) -> None:
        food = self.client.get_food("oats")
        self.assertEqual(food.name, "Oats")
        self.assertEqual(food.prot100, 16.9)
        self.assertEqual(food.fat100, 6.9)
        self.assertEqual(food.carb100, 66.3)

    def test_get_missing_food_is_api_error(self) -> None:
        with self.assertRaises(FoodApiError) as ctx:
            self.client.get_food("missing")
        self.assertEqual(str(ctx.exception), "Food not found")

    def test_delete_food(self) -> None:
        self.client.delete_food("apple")
        self.assertEqual(self.api.state.deleted, ["apple"])
        self.assertNotIn("apple", self.api.state.foods)

    def test_delete_application_error(self) -> None:
        self.api.state.delete_error = "Food is used in the journal"
        with self.assertRaises(FoodApiError) as ctx:
            self.client.delete_food("apple")
        self.assertEqual(str(ctx.exception), "Food is used in the journal")
        self.assertIn("apple", self.api.state.foods)

    def test_delete_empty_key_is_request_error(self) -> None:
        with self.assertRaises(FoodRequestError):
            self.client.delete_food("")
        self.assertEqual(self.api.state.deleted, [])

    def test_http_error_is_transport_error(self) -> None:
        self.api.state.server_error = True
        with self.assertRaises(FoodTransportError):
            self.client.list_foods()

    def test_unreadable_body_is_transport_error(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        with httpx.Client(base_url="http://food.local", transport=transport) as http:
            client = FoodApiClient("http://food.local", http=http)
            with self.assertRaises(FoodTransportError):
                client.list_foods()

    def test_connection_failure_is_transport_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with httpx.Client(base_url="http://food.local", transport=httpx.MockTransport(refuse)) as http:
            client = FoodApiClient("http://food.local", http=http)
            with self.assertRaises(FoodTransportError) as ctx:
                client.get_food("apple")
        self.assertIn("connection refused", str(ctx.exception))

    def test_delete_sends_key_as_json(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.path, request.content))
            return httpx.Response(200, json={"error": "", "data": "ok"})

        with httpx.Client(base_url="http://food.local", transport=httpx.MockTransport(handler)) as http:
            FoodApiClient("http://food.local", http=http).delete_food("a b")

        self.assertEqual(seen[0][0], "POST")
        self.assertEqual(seen[0][1], "/food/api/del")
        self.assertEqual(json.loads(seen[0][2]), {"key": "a b"})


if __name__ == "__main__":
    unittest.main()
