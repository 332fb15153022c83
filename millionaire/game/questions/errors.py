class QuestionBankError(Exception):
    pass


class NoQuestionAvailableError(QuestionBankError):
    def __init__(self, level: int) -> None:
        super().__init__(f"no unused question available for level {level}")
        self.level = level
