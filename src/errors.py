"""Errors raised while building and annotating the pedigree graph."""


class MutmapError(Exception):
    pass


class DuplicateIdError(MutmapError):
    def __init__(self, person_id):
        super().__init__(f"Person ID {person_id} already exists in graph")
        self.person_id = person_id


class NotFoundError(MutmapError, KeyError):
    def __init__(self, person_id):
        super().__init__(f"Person ID {person_id} not found in graph")
        self.person_id = person_id

    def __str__(self):
        return self.args[0]


class LayoutConsistencyError(MutmapError):
    pass


class OverlayNotFound(MutmapError):
    """The mutation could not be attached to any person."""


class UnmatchedSample(MutmapError):
    def __init__(self, sample_name: str):
        super().__init__(f"No pedigree match for sample column {sample_name}")
        self.sample_name = sample_name
