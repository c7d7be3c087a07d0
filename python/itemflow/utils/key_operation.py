"""
Some key operations in Spark, with item sets as keys.
    -> PySpark's default partition function (portable_hash) refuses to run unless
       PYTHONHASHSEED is set. Item sets carry their own process-independent hash,
       so the helpers here partition with it instead.
    -> Sorting uses the rendering-based order of item sets.

>> from pyspark import SparkContext
>> from itemflow import ItemSet
>> from itemflow.utils.key_operation import reduce_by_item_set
>> data = SparkContext.getOrCreate().parallelize([(ItemSet("a", "b"), 1), (ItemSet("a", "b"), 2)])
>> reduce_by_item_set(data, lambda x, y: x + y).collect()
[(ItemSet('a', 'b'), 3)]
"""
import logging
from typing import Callable

from pyspark import RDD

from itemflow.item_set import ItemSet
from itemflow.utils.hash import INT32_MAX

__all__ = [
    "item_set_partitioner", "reduce_by_item_set", "sort_by_item_set",
    "split_heads", "filter_subsumed", "to_wire", "from_wire"
]

logger = logging.getLogger(__name__)


def item_set_partitioner(key: ItemSet) -> int:
    """
    Partition function for partitionBy/reduceByKey/groupByKey.
    Spark takes the result modulo the number of partitions.
    """
    return key.hash_code() & INT32_MAX


def reduce_by_item_set(rdd: RDD, func: Callable, num_partitions: int=None) -> RDD:
    """
    :param rdd: RDD<(ItemSet, value)>
    :param func: (value, value) -> value
    :param num_partitions: int, defaults to Spark's default parallelism.
    :return: RDD<(ItemSet, value)>
    """
    logger.debug("reduceByKey on item set keys, num_partitions=%s", num_partitions)
    return rdd.reduceByKey(func, numPartitions=num_partitions, partitionFunc=item_set_partitioner)


def sort_by_item_set(rdd: RDD, ascending: bool=True, num_partitions: int=None) -> RDD:
    """
    :param rdd: RDD<(ItemSet, value)>
    :return: RDD<(ItemSet, value)>, ordered by the rendering of the keys.
    """
    logger.debug("sortByKey on item set keys, ascending=%s, num_partitions=%s", ascending, num_partitions)
    return rdd.sortByKey(ascending=ascending, numPartitions=num_partitions)


def _split_head(item_set: ItemSet):
    if len(item_set) == 0:
        return []
    tail = ItemSet(item_set)
    head = tail.extract_head()
    return [(head, tail)]


def split_heads(rdd: RDD) -> RDD:
    """
    ItemSet(a, b, c) -> (a, ItemSet(b, c)). Empty item sets are dropped,
    the item sets of the input are not modified.
    :param rdd: RDD<ItemSet>
    :return: RDD<(str, ItemSet)>
    """
    return rdd.flatMap(_split_head)


def filter_subsumed(rdd: RDD, pattern: ItemSet) -> RDD:
    """
    :param rdd: RDD<ItemSet>
    :param pattern: ItemSet
    :return: RDD<ItemSet>, the item sets containing every item of pattern.
    """
    return rdd.filter(lambda item_set: item_set.subsumes(pattern))


def to_wire(rdd: RDD) -> RDD:
    """
    :param rdd: RDD<ItemSet>
    :return: RDD<bytes>
    """
    return rdd.map(lambda item_set: item_set.to_bytes())


def from_wire(rdd: RDD) -> RDD:
    """
    :param rdd: RDD<bytes>
    :return: RDD<ItemSet>. A malformed record fails the job with DecodeError.
    """
    return rdd.map(ItemSet.from_bytes)
