# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Tests for L{txresolve.answer}.
"""

import attr

from twisted.names import dns
from twisted.trial.unittest import SynchronousTestCase

from txresolve.answer import Answer
from txresolve.test.fakes import aRecord



class AnswerBuilderTests(SynchronousTestCase):
    """
    Tests for L{Answer.builder}.
    """

    def test_defaults(self):
        """
        Without further settings an answer is a successful, empty answer to
        an C{IN}/C{ALL_RECORDS} query.
        """
        answer = Answer.builder().setQueryName(dns.Name(b"example")).create()
        self.assertEqual(
            answer, Answer(dns.Name(b"example"), dns.IN, dns.ALL_RECORDS,
                           dns.OK, ()))


    def test_chained(self):
        """
        Setters return the builder and every part ends up in the answer.
        """
        record = aRecord(b"example", "10.0.0.1")
        answer = (Answer.builder()
                  .setQueryName(dns.Name(b"example"))
                  .setQueryClass(dns.ANY)
                  .setQueryType(dns.A)
                  .setResultCode(dns.ENAME)
                  .addAnswerRecord(record)
                  .create())
        self.assertEqual(answer.queryName, dns.Name(b"example"))
        self.assertEqual(answer.queryClass, dns.ANY)
        self.assertEqual(answer.queryType, dns.A)
        self.assertEqual(answer.resultCode, dns.ENAME)
        self.assertEqual(answer.answers, (record,))


    def test_recordOrder(self):
        """
        Records keep the order they were added in.
        """
        first = aRecord(b"example", "10.0.0.1")
        second = aRecord(b"example", "10.0.0.2")
        third = aRecord(b"example", "10.0.0.3")
        answer = (Answer.builder().setQueryName(dns.Name(b"example"))
                  .addAnswerRecord(first)
                  .addAnswerRecords([second, third])
                  .create())
        self.assertEqual(answer.answers, (first, second, third))


    def test_createSnapshots(self):
        """
        Records added after C{create} do not change answers already created.
        """
        builder = Answer.builder().setQueryName(dns.Name(b"example"))
        builder.addAnswerRecord(aRecord(b"example", "10.0.0.1"))
        first = builder.create()
        builder.addAnswerRecord(aRecord(b"example", "10.0.0.2"))
        second = builder.create()
        self.assertEqual(len(first.answers), 1)
        self.assertEqual(len(second.answers), 2)


    def test_queryNameRequired(self):
        self.assertRaises(ValueError, Answer.builder().create)



class AnswerTests(SynchronousTestCase):
    """
    Tests for L{Answer}.
    """

    def test_frozen(self):
        answer = Answer(dns.Name(b"example"))
        self.assertRaises(
            attr.exceptions.FrozenInstanceError,
            setattr, answer, "resultCode", dns.ESERVER)


    def test_answersTuple(self):
        """
        The records are stored as a L{tuple} even when given as a L{list}.
        """
        records = [aRecord(b"example", "10.0.0.1")]
        answer = Answer(dns.Name(b"example"), answers=records)
        records.append(aRecord(b"example", "10.0.0.2"))
        self.assertEqual(answer.answers, (aRecord(b"example", "10.0.0.1"),))


    def test_fromQuery(self):
        """
        L{Answer.fromQuery} echoes the name, class and type of a L{dns.Query}.
        """
        query = dns.Query(b"example", dns.TXT, dns.CH)
        answer = Answer.fromQuery(query, dns.EREFUSED)
        self.assertEqual(
            answer,
            Answer(dns.Name(b"example"), dns.CH, dns.TXT, dns.EREFUSED))
