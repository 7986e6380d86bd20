class BattleEngineError(Exception):
    """Base for battle engine errors."""


class SnapshotBuildError(BattleEngineError):
    def __init__(self, form_id: str, detail: str):
        super().__init__(f"Cannot build snapshot for form '{form_id}': {detail}")
        self.form_id = form_id
        self.detail = detail


class FormNotFoundError(SnapshotBuildError):
    def __init__(self, form_id: str):
        super().__init__(form_id, "form not found")


class BattleNotInitializedError(BattleEngineError):
    pass
