from ast_nodes import (
    Assign, Binary, Block, ExpressionStmt, Grouping, If, Literal, Logical, Unary, VarDecl, Variable, While,
)


# nested dicts and lists, one dict per node, keyed by field name
def ast_to_dict(node):
    if node is None:
        return None

    if isinstance(node, list):
        return [ast_to_dict(s) for s in node]

    t = node.__class__.__name__
    d = {"type": t}

    if isinstance(node, ExpressionStmt):
        d["expression"] = ast_to_dict(node.expression)
    elif isinstance(node, VarDecl):
        d["name"] = node.name.lexeme
        d["var_type"] = node.type_annotation.lexeme if node.type_annotation is not None else None
        d["initializer"] = ast_to_dict(node.initializer)
    elif isinstance(node, Block):
        d["statements"] = ast_to_dict(node.statements)
    elif isinstance(node, If):
        d["condition"] = ast_to_dict(node.condition)
        d["then_block"] = ast_to_dict(node.then_block)
        d["else_block"] = ast_to_dict(node.else_block)
    elif isinstance(node, While):
        d["keyword"] = node.keyword.lexeme
        d["condition"] = ast_to_dict(node.condition)
        d["body"] = ast_to_dict(node.body)
    elif isinstance(node, (Binary, Logical)):
        d["op"] = node.operator.lexeme
        d["left"] = ast_to_dict(node.left)
        d["right"] = ast_to_dict(node.right)
    elif isinstance(node, Unary):
        d["op"] = node.operator.lexeme
        d["operand"] = ast_to_dict(node.operand)
    elif isinstance(node, Literal):
        d["value"] = node.value.lexeme
    elif isinstance(node, Grouping):
        d["expression"] = ast_to_dict(node.expression)
    elif isinstance(node, Variable):
        d["name"] = node.name.lexeme
    elif isinstance(node, Assign):
        d["name"] = node.name.lexeme
        d["value"] = ast_to_dict(node.value)
    else:
        d["raw"] = str(node)

    return d


def _pretty_lines(obj, depth):
    pad = "  " * depth
    if isinstance(obj, dict):
        for key, value in obj.items():
            if isinstance(value, (dict, list)):
                yield f"{pad}{key}:"
                yield from _pretty_lines(value, depth + 1)
            else:
                yield f"{pad}{key}: {value}"
    elif isinstance(obj, list):
        if not obj:
            yield f"{pad}[]"
        for item in obj:
            yield f"{pad}-"
            yield from _pretty_lines(item, depth + 1)
    else:
        yield f"{pad}{obj}"


def pretty(obj, indent=0):
    """Indented YAML-ish text for the output of ast_to_dict."""
    return "\n".join(_pretty_lines(obj, indent))
