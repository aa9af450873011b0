"""Record models and an async store-client adapter shared by the tests."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Note(BaseModel):
    """Record model used across unit tests."""

    id: str
    owner: str
    text: str
    completed: bool


class Address(BaseModel):
    city: str
    zip_code: str


class Profile(BaseModel):
    """Record model with numbers, nesting and optional fields."""

    user_id: str
    display_name: str = Field(..., min_length=1)
    visits: int = Field(0, ge=0)
    rating: float = 0.0
    address: Optional[Address] = None
    tags: List[str] = Field(default_factory=list)


class Task(BaseModel):
    """Record model for the moto-backed tables (no DynamoDB reserved words)."""

    task_id: str
    project_id: str
    task_title: str
    is_done: bool = False
    priority_score: float = 0.0
    label_list: List[str] = Field(default_factory=list)


class Ticket(BaseModel):
    """Record model with an aliased attribute, a reserved word and a non-None default."""

    task_id: str
    ticket_title: str = Field(alias='ticketTitle')
    status: str = 'open'
    assignee: Optional[str] = 'unassigned'


class AsyncClientAdapter:
    """Expose a synchronous boto3 DynamoDB client as an async store client."""

    def __init__(self, client):
        self._client = client
        self.calls: List[str] = []

    async def get_item(self, **kwargs):
        self.calls.append('get_item')
        return self._client.get_item(**kwargs)

    async def put_item(self, **kwargs):
        self.calls.append('put_item')
        return self._client.put_item(**kwargs)

    async def update_item(self, **kwargs):
        self.calls.append('update_item')
        return self._client.update_item(**kwargs)

    async def delete_item(self, **kwargs):
        self.calls.append('delete_item')
        return self._client.delete_item(**kwargs)
