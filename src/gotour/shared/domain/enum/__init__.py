from .actor_role import ActorRole as ActorRole
