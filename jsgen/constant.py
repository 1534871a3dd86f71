from dataclasses import dataclass, replace

Precedence = {
    "Sequence": 0,
    "Yield": 1,
    "Assignment": 1,
    "Conditional": 2,
    "ArrowFunction": 2,
    "Coalesce": 3,
    "LogicalOR": 4,
    "LogicalAND": 5,
    "BitwiseOR": 6,
    "BitwiseXOR": 7,
    "BitwiseAND": 8,
    "Equality": 9,
    "Relational": 10,
    "BitwiseSHIFT": 11,
    "Additive": 12,
    "Multiplicative": 13,
    "Exponentiation": 14,
    "Await": 15,
    "Unary": 15,
    "Postfix": 16,
    "OptionalChaining": 17,
    "Call": 18,
    "New": 19,
    "TaggedTemplate": 20,
    "Member": 21,
    "Primary": 22
}

BinaryPrecedence = {
    '??': Precedence["Coalesce"],
    '||': Precedence["LogicalOR"],
    '&&': Precedence["LogicalAND"],
    '|': Precedence["BitwiseOR"],
    '^': Precedence["BitwiseXOR"],
    '&': Precedence["BitwiseAND"],
    '==': Precedence["Equality"],
    '!=': Precedence["Equality"],
    '===': Precedence["Equality"],
    '!==': Precedence["Equality"],
    'is': Precedence["Equality"],
    'isnt': Precedence["Equality"],
    '<': Precedence["Relational"],
    '>': Precedence["Relational"],
    '<=': Precedence["Relational"],
    '>=': Precedence["Relational"],
    'in': Precedence["Relational"],
    'instanceof': Precedence["Relational"],
    '<<': Precedence["BitwiseSHIFT"],
    '>>': Precedence["BitwiseSHIFT"],
    '>>>': Precedence["BitwiseSHIFT"],
    '+': Precedence["Additive"],
    '-': Precedence["Additive"],
    '*': Precedence["Multiplicative"],
    '%': Precedence["Multiplicative"],
    '/': Precedence["Multiplicative"],
    '**': Precedence["Exponentiation"]
}


@dataclass(frozen=True)
class Flags:
    """Context threaded through the recursive descent.

    Expression generators read ``allow_in``, ``allow_call``,
    ``allow_unparenthesized_new`` and ``found_coalesce``; statement
    generators read ``allow_in``, ``function_body``, ``directive_context``
    and ``semicolon_optional``.
    """
    allow_in: bool = False
    allow_call: bool = False
    allow_unparenthesized_new: bool = False
    function_body: bool = False
    directive_context: bool = False
    semicolon_optional: bool = False
    found_coalesce: bool = False

    def with_(self, **changes):
        return replace(self, **changes)


# Expression flag sets, named after (allow_in, allow_call, allow_unparenthesized_new)
E_FTT = Flags(allow_call=True, allow_unparenthesized_new=True)
E_TTF = Flags(allow_in=True, allow_call=True)
E_TTT = Flags(allow_in=True, allow_call=True, allow_unparenthesized_new=True)
E_TFF = Flags(allow_in=True)
E_FFT = Flags(allow_unparenthesized_new=True)
E_TFT = Flags(allow_in=True, allow_unparenthesized_new=True)

# Statement flag sets, named after
# (allow_in, function_body, directive_context, semicolon_optional)
S_TFFF = Flags(allow_in=True)
S_TFFT = Flags(allow_in=True, semicolon_optional=True)
S_FFFF = Flags()
S_TFTF = Flags(allow_in=True, directive_context=True)
S_TTFF = Flags(allow_in=True, function_body=True)
