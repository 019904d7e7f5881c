"""SpecGrade — grade OpenAPI 3.x descriptions against conformance rules.

Usage::

    from specgrade.bootstrap import Container

    container = Container()
    report = container.grade_document().execute("specs/", version="3.1.0")
    print(report.score, report.grade)
"""

__version__ = "0.1.0"
