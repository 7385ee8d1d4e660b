from indra import *

main = parse('(+ 1 2)')
assert main.kind is Kind.BRANCH and main.next.kind is Kind.NIL
assert [(a.kind, a.value) for a in main.children()] == [
    (Kind.SYMBOL, '+'), (Kind.INT, 1), (Kind.INT, 2)
]

main = parse('(a (b c) d)')
a, bc, d = main.children()
assert (a.value, d.value) == ('a', 'd')
assert [x.value for x in bc.children()] == ['b', 'c']

assert equivalent(parse('; comment\n(x)'), parse('(x)'))

main = parse("'x")
assert main.kind is Kind.QUOTE
assert (main.next.kind, main.next.value) == (Kind.SYMBOL, 'x')
assert main.next.next.kind is Kind.NIL

main = parse('"hello"')
assert (main.kind, main.value) == (Kind.STRING, 'hello')

main = parse('(1 12a 2.5e1)')
assert [(a.kind, a.value) for a in main.children()] == [
    (Kind.INT, 1), (Kind.ERROR, "Can't parse: <12a>"), (Kind.FLOAT, 25.0)
]

reader = Reader('(a "abc')
main = validate(reader.parse())
assert [a.value for a in main.children()] == ['a']
assert [d.kind for d in reader.diagnostics] == [
    DiagnosticKind.UNTERMINATED_STRING, DiagnosticKind.UNTERMINATED_LIST
]
assert reader.parse().kind is Kind.NIL

for source in ['(+ 1 2)', "(define (f x) '(x (y) -3))", '(()) a']:
    main = parse(source)
    assert equivalent(parse(render(main)), main)

main = parse('(' * 3000 + ')' * 3000)
assert render(main) == '(' * 3000 + ')' * 3000

print('all passed')
