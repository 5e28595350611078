from pydantic import BaseModel, Field

class Item(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    image: str = Field(min_length=1)

class ItemsOut(BaseModel):
    items: list[Item]

class AddItemOut(BaseModel):
    message: str
