"""
Example compositions of sequences

Run this module to print some examples:

.. code:: bash

    python -m seqlet.examples
"""
import argparse
import logging
import operator

from .sources import rangelet, countlet


def squares(count):
    """The squares of 1 through ``count``, inclusive"""
    return rangelet(1, count + 1).map(lambda value: value * value).collect()


def factorial(number):
    """The factorial of a positive integer ``number``"""
    return rangelet(1, number + 1).reduce(1, operator.mul)


def primes(count):
    """The first ``count`` prime numbers"""
    return countlet().drop(2).filter(is_prime).take(count).collect()


def is_prime(number):
    if number < 2:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description='Compute some example sequences')
    parser.add_argument('--squares', type=int, default=20, help='number of squares to compute')
    parser.add_argument('--factorial', type=int, default=10, help='number to compute the factorial of')
    parser.add_argument('--primes', type=int, default=100, help='number of primes to compute')
    parser.add_argument('--debug', action='store_true', help='log the lifetime of every stage')
    options = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if options.debug else logging.WARNING)
    print('Squares of 1 ~ %d: %s' % (options.squares, squares(options.squares)))
    print('Factorial of %d: %d' % (options.factorial, factorial(options.factorial)))
    print('The first %d prime numbers: %s' % (options.primes, primes(options.primes)))


if __name__ == '__main__':
    main()
