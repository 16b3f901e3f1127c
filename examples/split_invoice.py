from __future__ import annotations

import logging

from suite_money import Money


logger = logging.getLogger(__name__)


def run() -> None:
    # Invoice total to be split between three parties
    invoice = Money("GBP", "1000.00")
    # Each party pays in proportion to its headcount; the third party is exempt
    weights = [3, 7, 0]

    shares = invoice.share(weights)
    for index, (weight, share) in enumerate(zip(weights, shares)):
        logger.info(f"Party #{index} (weight {weight}) pays {share}")

    # Shares always add up to the invoice total exactly
    total = shares[0]
    for share in shares[1:]:
        total = total + share
    logger.info(f"Total of shares: {total} (invoice: {invoice})")

    # Splitting one penny-odd amount equally: the first party gets the extra penny
    for share in Money("GBP", "0.05").share([1, 1]):
        logger.info(f"Equal share: {share}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
