from slidecore.engine.gameplay.player import ArtificialPlayer, IQProfile, Skill

__all__ = ["ArtificialPlayer", "IQProfile", "Skill"]
