#!/usr/bin/env python3
import logging
from polynomial import Polynomial
from rational import Rational

def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    f1 = Polynomial.from_pairs([
        (1, 3),
        (Rational.from_float(-4.5), 2),
        (Rational(7, 2), 1),
        (3, 0),
    ])
    print(f1)
    print(f"f(1) = {f1.evaluate(1)}")
    for x in f1.sorted_rational_roots():
        print(x)

if __name__ == "__main__":
    main()
