"""Child keys per ESTree node type, in source order.

Covers ES2022, JSX, decorators and the TypeScript wrappers that can hold
ordinary expressions. Decorators come first, as in @typescript-eslint/visitor-keys.
Types not listed fall back to the node's own key order (see
traversal.iter_child_nodes).
"""

from collections.abc import Mapping
from types import MappingProxyType

# Keys that never hold child nodes
NON_CHILD_KEYS = frozenset(
    {
        "type",
        "loc",
        "range",
        "start",
        "end",
        "parent",
        "tokens",
        "comments",
        "leadingComments",
        "trailingComments",
    }
)

VISITOR_KEYS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "AccessorProperty": ("decorators", "key", "value"),
        "ArrayExpression": ("elements",),
        "ArrayPattern": ("decorators", "elements"),
        "ArrowFunctionExpression": ("params", "body"),
        "AssignmentExpression": ("left", "right"),
        "AssignmentPattern": ("decorators", "left", "right"),
        "AwaitExpression": ("argument",),
        "BinaryExpression": ("left", "right"),
        "BlockStatement": ("body",),
        "BreakStatement": ("label",),
        "CallExpression": ("callee", "arguments"),
        "CatchClause": ("param", "body"),
        "ChainExpression": ("expression",),
        "ClassBody": ("body",),
        "ClassDeclaration": ("decorators", "id", "superClass", "body"),
        "ClassExpression": ("decorators", "id", "superClass", "body"),
        "ConditionalExpression": ("test", "consequent", "alternate"),
        "ContinueStatement": ("label",),
        "DebuggerStatement": (),
        "Decorator": ("expression",),
        "DoWhileStatement": ("body", "test"),
        "EmptyStatement": (),
        "ExportAllDeclaration": ("exported", "source"),
        "ExportDefaultDeclaration": ("declaration",),
        "ExportNamedDeclaration": ("declaration", "specifiers", "source"),
        "ExportSpecifier": ("local", "exported"),
        "ExpressionStatement": ("expression",),
        "ForInStatement": ("left", "right", "body"),
        "ForOfStatement": ("left", "right", "body"),
        "ForStatement": ("init", "test", "update", "body"),
        "FunctionDeclaration": ("id", "params", "body"),
        "FunctionExpression": ("id", "params", "body"),
        "Identifier": ("decorators",),
        "IfStatement": ("test", "consequent", "alternate"),
        "ImportDeclaration": ("specifiers", "source"),
        "ImportDefaultSpecifier": ("local",),
        "ImportExpression": ("source",),
        "ImportNamespaceSpecifier": ("local",),
        "ImportSpecifier": ("imported", "local"),
        "LabeledStatement": ("label", "body"),
        "Literal": (),
        "LogicalExpression": ("left", "right"),
        "MemberExpression": ("object", "property"),
        "MetaProperty": ("meta", "property"),
        "MethodDefinition": ("decorators", "key", "value"),
        "NewExpression": ("callee", "arguments"),
        "ObjectExpression": ("properties",),
        "ObjectPattern": ("decorators", "properties"),
        "PrivateIdentifier": (),
        "Program": ("body",),
        "Property": ("key", "value"),
        "PropertyDefinition": ("decorators", "key", "value"),
        "RestElement": ("decorators", "argument"),
        "ReturnStatement": ("argument",),
        "SequenceExpression": ("expressions",),
        "SpreadElement": ("argument",),
        "StaticBlock": ("body",),
        "Super": (),
        "SwitchCase": ("test", "consequent"),
        "SwitchStatement": ("discriminant", "cases"),
        "TaggedTemplateExpression": ("tag", "quasi"),
        "TemplateElement": (),
        "TemplateLiteral": ("quasis", "expressions"),
        "ThisExpression": (),
        "ThrowStatement": ("argument",),
        "TryStatement": ("block", "handler", "finalizer"),
        "UnaryExpression": ("argument",),
        "UpdateExpression": ("argument",),
        "VariableDeclaration": ("declarations",),
        "VariableDeclarator": ("id", "init"),
        "WhileStatement": ("test", "body"),
        "WithStatement": ("object", "body"),
        "YieldExpression": ("argument",),
        # JSX
        "JSXAttribute": ("name", "value"),
        "JSXClosingElement": ("name",),
        "JSXClosingFragment": (),
        "JSXElement": ("openingElement", "children", "closingElement"),
        "JSXEmptyExpression": (),
        "JSXExpressionContainer": ("expression",),
        "JSXFragment": ("openingFragment", "children", "closingFragment"),
        "JSXIdentifier": (),
        "JSXMemberExpression": ("object", "property"),
        "JSXNamespacedName": ("namespace", "name"),
        "JSXOpeningElement": ("name", "attributes"),
        "JSXOpeningFragment": (),
        "JSXSpreadAttribute": ("argument",),
        "JSXSpreadChild": ("expression",),
        "JSXText": (),
        # TypeScript wrappers (type positions are not descended)
        "TSAsExpression": ("expression",),
        "TSNonNullExpression": ("expression",),
        "TSParameterProperty": ("decorators", "parameter"),
        "TSSatisfiesExpression": ("expression",),
        "TSTypeAssertion": ("expression",),
    }
)
