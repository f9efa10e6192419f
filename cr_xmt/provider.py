from .xmt_operator import XmtFunctionReturn


class Provider:
    """cosmic-ray operator provider, registered as the 'cr_xmt' entry point."""
    _operators = {"xmt/function-return": XmtFunctionReturn}

    def __iter__(self):
        return iter(self._operators)

    def __getitem__(self, name):
        return self._operators[name]
