"""Shared fixtures: sample OpenAPI descriptions written to tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from specgrade.config.loader import clear_cache

PETSTORE_YAML = """\
openapi: 3.1.0
info:
  title: Pet Store API
  version: 1.0.0
paths:
  /pets:
    get:
      operationId: listPets
      description: Returns every pet in the store
      parameters:
        - $ref: '#/components/parameters/Limit'
      responses:
        200:
          description: A list of pets
        400:
          $ref: '#/components/responses/BadRequest'
        500:
          $ref: '#/components/responses/ServerError'
    post:
      operationId: createPet
      description: Adds a new pet to the store
      responses:
        '201':
          description: Created
        '400':
          $ref: '#/components/responses/BadRequest'
        '500':
          $ref: '#/components/responses/ServerError'
  /pets/{petId}:
    get:
      operationId: showPetById
      description: Returns a single pet by its identifier
      parameters:
        - name: petId
          in: path
          required: true
          schema:
            type: string
            example: abc-123
      responses:
        '200':
          description: The pet
        '400':
          $ref: '#/components/responses/BadRequest'
        '500':
          $ref: '#/components/responses/ServerError'
components:
  parameters:
    Limit:
      name: limit
      in: query
      schema:
        type: integer
        example: 20
  responses:
    BadRequest:
      description: Invalid request
    ServerError:
      description: Unexpected error
  schemas:
    Pet:
      type: object
      required: [id, name]
      properties:
        id:
          type: integer
          example: 1
        name:
          type: string
          example: Rex
        owner:
          $ref: '#/components/schemas/Owner'
    Owner:
      type: object
      properties:
        name:
          type: string
          example: Ann
        favourite:
          $ref: '#/components/schemas/Pet'
  securitySchemes:
    bearerAuth:
      type: http
      scheme: bearer
"""

UNTITLED_YAML = """\
openapi: 3.1.0
info:
  title: ""
  version: 1.0.0
paths:
  /pets:
    get:
      description: List all the pets
"""


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def petstore_file(tmp_path: Path) -> Path:
    path = tmp_path / "openapi.yaml"
    path.write_text(PETSTORE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def untitled_file(tmp_path: Path) -> Path:
    path = tmp_path / "untitled.yaml"
    path.write_text(UNTITLED_YAML, encoding="utf-8")
    return path
