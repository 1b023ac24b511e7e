import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple


Genes = Tuple[int, ...]


@dataclass(frozen=True, eq=False)
class Individual:
    """A tour over table indices together with its cyclic cost."""

    genes: Genes
    cost: float


def random_genes(size: int, rng: random.Random) -> Genes:
    genes = list(range(size))
    rng.shuffle(genes)
    return tuple(genes)


def block_sizes(length: int, num_parents: int) -> List[int]:
    base = length // num_parents
    return [base] * (num_parents - 1) + [length - base * (num_parents - 1)]


def recombine(parents: Sequence[Genes], rng: random.Random) -> Genes:
    """
    Multi-parent block crossover. Parent i contributes a block made of its
    first genes not already claimed by earlier blocks, kept in its own order.
    The blocks are then concatenated in random order.
    """
    claimed = set()
    blocks: List[List[int]] = []
    for parent, size in zip(parents, block_sizes(len(parents[0]), len(parents))):
        block: List[int] = []
        for gene in parent:
            if len(block) == size:
                break
            if gene not in claimed:
                claimed.add(gene)
                block.append(gene)
        blocks.append(block)
    rng.shuffle(blocks)
    return tuple(gene for block in blocks for gene in block)
