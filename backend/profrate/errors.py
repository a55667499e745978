"""Error kinds raised by the rating core and mapped to HTTP responses in main."""


class ProfRateError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProfessorNotFound(ProfRateError):
    status_code = 404

    def __init__(self, professor_id: int):
        super().__init__("Professor not found")
        self.professor_id = professor_id


class MalformedScope(ProfRateError):
    """A course id that is unusable or not taught by the professor."""
    status_code = 400

    def __init__(self, professor_id: int, course_id, message: str = None):
        super().__init__(message or f"Course {course_id} is not taught by professor {professor_id}")
        self.professor_id = professor_id
        self.course_id = course_id


class StoreFailure(ProfRateError):
    status_code = 500
