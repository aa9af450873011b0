#!/usr/bin/env python3
"""
Basic usage example for the DynamoDB accessor.

This example demonstrates:
1. Setting up configuration
2. Binding a Pydantic record model to a table
3. Saving, reading, updating and removing items
4. Handling the accessor's typed errors

It expects a local DynamoDB (e.g. `docker run -p 8000:8000 amazon/dynamodb-local`)
with a `dev_notes` table keyed by `id`.
"""

import asyncio

from pydantic import BaseModel, Field

from dynamodb_accessor import (
    DynamoDBConfig,
    InvalidKeyError,
    ItemNotFoundError,
    SchemaViolationError,
    create_dynamodb_client,
    create_table_accessor,
)


class Note(BaseModel):
    id: str
    owner: str
    text: str = Field(..., min_length=1)
    completed: bool = False
    priority: float = 1.0


async def main():
    """Demonstrate basic usage of the DynamoDB accessor."""

    # 1. Configure DynamoDB connection
    print("1. Setting up DynamoDB configuration...")
    config = DynamoDBConfig.for_local_development()

    # In deployed environments, use environment variables instead:
    # config = DynamoDBConfig.from_env()

    async with create_dynamodb_client(config) as client:
        # 2. Bind the Note model to its table
        print("2. Creating table accessor...")
        notes = create_table_accessor(client, Note, "notes", "id", config=config)
        print(f"Using table: {notes.table_name}")

        # 3. Save a full record
        print("3. Saving a note...")
        note = await notes.save({"id": "note-1", "owner": "ana", "text": "Buy milk", "priority": 2.5})
        print(f"Saved note: {note.id}")

        # 4. Read it back, fully and with a projection
        print("4. Reading notes...")
        found = await notes.find({"id": "note-1"})
        print(f"Found note: {found.text} (completed={found.completed})")

        summary = await notes.find({"id": "note-1"}, ["completed"])
        print(f"Projected attributes: {summary}")

        # 5. Update a subset of attributes
        print("5. Updating a note...")
        updated = await notes.update({"id": "note-1"}, {"completed": True})
        print(f"Note completed: {updated.completed}")

        # 6. Typed errors
        print("6. Handling errors...")
        try:
            await notes.find({"note_id": "note-1"})
        except InvalidKeyError as e:
            print(f"Invalid key, expected '{e.expected_key}'")

        try:
            await notes.update({"id": "note-1"}, {"text": ""})
        except SchemaViolationError as e:
            print(f"Rejected patch fields: {e.fields}")

        # 7. Remove the note
        print("7. Removing the note...")
        await notes.remove({"id": "note-1"})
        try:
            await notes.find({"id": "note-1"})
        except ItemNotFoundError as e:
            print(f"Gone: {e.message}")

    print("\nExample completed!")


if __name__ == "__main__":
    asyncio.run(main())
