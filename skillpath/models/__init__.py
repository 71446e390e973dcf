from .profile import Profile
from .skill import UserSkill
from .learning import LearningPath
from .roadmap import SkillRoadmap, TopicProgress

__all__ = ["Profile", "UserSkill", "LearningPath", "SkillRoadmap", "TopicProgress"]
