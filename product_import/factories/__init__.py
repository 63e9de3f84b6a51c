from .subject_factory import SubjectFactory

__all__ = ["SubjectFactory"]
