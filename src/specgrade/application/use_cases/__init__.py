from specgrade.application.use_cases.grade_document import GradeDocumentUseCase

__all__ = ["GradeDocumentUseCase"]
