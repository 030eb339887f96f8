from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RecipeDraft:
    """Best-effort structure recovered from a recipe transcript."""

    title: str = ""
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    servings: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
        }


@dataclass
class Recipe:
    """A draft once it has been given an identity, ready to be stored."""

    id: str
    title: str
    created_at: int
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    servings: Optional[int] = None
    image: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "createdAt": self.created_at,
        }
        if self.image:
            data["image"] = self.image
        if self.category:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            created_at=int(data.get("createdAt") or 0),
            ingredients=list(data.get("ingredients") or []),
            instructions=list(data.get("instructions") or []),
            prep_time=data.get("prepTime") or None,
            cook_time=data.get("cookTime") or None,
            servings=data.get("servings") or None,
            image=data.get("image"),
            category=data.get("category"),
        )
