import logging
from collections import namedtuple

from plinq import P, from_range, NoMatchError

# configure minimal logging
logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

Order = namedtuple('Order', ['customer', 'total', 'status'])

orders = {
    'o-100': Order('alice', 120.0, 'shipped'),
    'o-101': Order('bob', 35.5, 'pending'),
    'o-102': Order('alice', 15.0, 'cancelled'),
    'o-103': Order('carol', 250.0, 'shipped'),
}


def main():
    shipped = P(orders).where(lambda o: o.status == 'shipped')
    logger.info(f"shipped orders: {shipped.to.keys()}")
    logger.info(f"largest shipped: {shipped.aggregate(lambda a, o: a if a.total >= o.total else o)}")

    # string lambdas work anywhere a function does
    big = P(orders).first_or_default(None, '(o, k) ==> o.total > 200')
    logger.info(f"first order above 200: {big}")

    try:
        P(orders).first(lambda o: o.customer == 'dave')
    except NoMatchError as e:
        logger.info(f"no order for dave: {e}")

    squares = from_range(1, 10).select('v * v').where('v % 2 == 0')
    logger.info(f"even squares: {squares.to.series().to_dict()}")


if __name__ == "__main__":
    main()
