class RoseTreeError(Exception):
    pass


class EmptyForestError(RoseTreeError, ValueError):
    "a branch was built from an empty forest"
    def __init__(self, value):
        super().__init__(f'cannot build a branch of {value!r} from an empty forest')
        self.value = value


class NotABranchError(RoseTreeError, TypeError):
    "a branch only operation was given a leaf"


class ArbitraryOptionsError(RoseTreeError, ValueError):
    pass


class DecodeError(RoseTreeError, ValueError):
    def __init__(self, msg, /, encoded=None):
        super().__init__(msg)
        # the offending piece of the encoded tree
        self.encoded = encoded
