"""Run generator-based recursion on an explicit stack.

A coroutine "calls" another by yielding the callee generator; `scheduling`
suspends the caller, runs the callee to completion and sends its return value
back. Recursion depth therefore costs heap memory, not interpreter frames.

    def depth(n):
        if n == 0:
            return 0
        below = yield depth(n - 1)
        return below + 1

    assert scheduling(depth(100000)) == 100000
"""
import types

__all__ = ['scheduling']


def scheduling(application):
    coroutines = [application]
    append = coroutines.append
    pop = coroutines.pop
    last = None
    while coroutines:
        end = coroutines[-1]
        try:
            value = end.send(last)
            if isinstance(value, types.GeneratorType):
                append(value)
                last = None
            else:
                # a plain yielded value finishes the coroutine early
                last = value
                pop().close()
        except StopIteration as e:
            pop()
            last = e.value
    return last
