"""
Basic usage example for flask-rest-plugin.

This example demonstrates:
- Format-based serialization (.json, .yml, .dump)
- Resource declaration
- Status helpers

Run with ``flask --app examples/basic_example.py run`` and try::

    curl http://localhost:5000/user/1.json
    curl http://localhost:5000/user/1.yml
    curl -X POST -H "Content-Type: application/json" \
         -d '{"name": "Carol", "email": "carol@example.com"}' \
         http://localhost:5000/user.json
"""

import logging

from flask import Flask
from pydantic import BaseModel, ValidationError

from flask_rest_plugin import (
    REST,
    request_entity,
    status_bad_request,
    status_created,
    status_not_found,
    status_ok,
)

logging.basicConfig(level=logging.INFO)

app = Flask(__name__)
app.config["REST_CONTENT_TYPES"] = {"text": "text/plain"}
app.config["REST_SERIALIZERS"] = {"text": "YAML"}

rest = REST(app)
rest.prepare_serializer_for_format()


class User(BaseModel):
    id: str
    name: str
    email: str


class CreateUser(BaseModel):
    name: str
    email: str


# In-memory data store for this example
users_db = {
    "1": User(id="1", name="Alice", email="alice@example.com"),
    "2": User(id="2", name="Bob", email="bob@example.com"),
}


@app.get("/users.<format>")
def list_users():
    return status_ok([user.model_dump() for user in users_db.values()])


def get_user(id):
    user = users_db.get(id)
    if user is None:
        return status_not_found(f"user {id} not found")
    return user.model_dump()


def create_user():
    try:
        data = CreateUser.model_validate(request_entity() or {})
    except ValidationError as e:
        return status_bad_request({"error": "Validation failed", "details": e.errors(include_url=False)})
    user = User(id=str(len(users_db) + 1), **data.model_dump())
    users_db[user.id] = user
    return status_created(user.model_dump())


def update_user(id):
    if id not in users_db:
        return status_not_found(f"user {id} not found")
    data = CreateUser.model_validate(request_entity() or {})
    users_db[id] = User(id=id, **data.model_dump())
    return users_db[id].model_dump()


def delete_user(id):
    if users_db.pop(id, None) is None:
        return status_not_found(f"user {id} not found")
    return {"deleted": id}


rest.resource("user", get=get_user, create=create_user, update=update_user, delete=delete_user)


if __name__ == "__main__":
    app.run(debug=True)
