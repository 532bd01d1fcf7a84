# -*- test-case-name: txresolve.test.test_answer -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
The result of a single query.
"""

from typing import Iterable, List, Optional, Tuple

import attr

from twisted.names import dns



@attr.s(frozen=True)
class Answer:
    """
    An immutable answer to one query.

    @ivar queryName: The name which was queried.
    @type queryName: L{dns.Name}

    @ivar queryClass: The queried class, such as L{dns.IN}.

    @ivar queryType: The queried type, such as L{dns.A}.

    @ivar resultCode: L{dns.OK} or one of the error response codes.  Unless it
        is L{dns.OK}, C{answers} carries no meaning and must not be read.

    @ivar answers: The answer records, in order.
    @type answers: L{tuple} of L{dns.RRHeader}
    """

    queryName: dns.Name = attr.ib()
    queryClass: int = attr.ib(default=dns.IN)
    queryType: int = attr.ib(default=dns.ALL_RECORDS)
    resultCode: int = attr.ib(default=dns.OK)
    answers: Tuple[dns.RRHeader, ...] = attr.ib(default=(), converter=tuple)

    @staticmethod
    def builder() -> "AnswerBuilder":
        """
        Create a new L{AnswerBuilder}.
        """
        return AnswerBuilder()


    @classmethod
    def fromQuery(cls, query, resultCode=dns.OK, answers=()) -> "Answer":
        """
        Create an answer echoing a L{dns.Query}.
        """
        return cls(query.name, query.cls, query.type, resultCode, answers)



class AnswerBuilder:
    """
    Accumulates the parts of an L{Answer}.

    Setters return the builder so calls can be chained.
    """

    def __init__(self):
        self._queryName: Optional[dns.Name] = None
        self._queryClass = dns.IN
        self._queryType = dns.ALL_RECORDS
        self._resultCode = dns.OK
        self._answers: List[dns.RRHeader] = []


    def setQueryName(self, name):
        self._queryName = name
        return self


    def setQueryClass(self, cls):
        self._queryClass = cls
        return self


    def setQueryType(self, type):
        self._queryType = type
        return self


    def setResultCode(self, resultCode):
        self._resultCode = resultCode
        return self


    def addAnswerRecord(self, record: dns.RRHeader):
        self._answers.append(record)
        return self


    def addAnswerRecords(self, records: Iterable[dns.RRHeader]):
        self._answers.extend(records)
        return self


    def create(self) -> Answer:
        """
        Create an L{Answer} from the parts given so far.

        @raise ValueError: If no query name was set.
        """
        if self._queryName is None:
            raise ValueError("An answer requires a query name")
        return Answer(
            self._queryName, self._queryClass, self._queryType,
            self._resultCode, self._answers)



__all__ = ["Answer", "AnswerBuilder"]
