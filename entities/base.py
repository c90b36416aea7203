from entities.entity_id import EntityID


class Entity:
    def __init__(self, entity_id: EntityID):
        if not isinstance(entity_id, EntityID):
            raise ValueError(f"Entity id must be of type {EntityID.__name__}")
        self.id = entity_id

    def contains(self, x: int, y: int) -> bool:
        raise NotImplementedError(f"Child entity MUST implement {self.contains.__name__}")
