class CodeGenerationError(Exception):
    """Base class for every error raised while generating code."""


class UnknownNodeTypeError(CodeGenerationError):
    def __init__(self, node_type):
        self.node_type = node_type
        super().__init__('Unknown node type: %s' % node_type)


class InvalidNumericLiteralError(CodeGenerationError):
    pass


class InvalidOptionError(CodeGenerationError):
    pass
