"""
Tests for the key-value stores and the persisted records.
"""

import json
from unittest import TestCase, main

import fakeredis
from pydantic import ValidationError

from web2048.storage.gateway import MemoryStore, RedisStore
from web2048.storage.records import SESSION_VERSION, SessionRecord, UndoSnapshot

BOARD = [[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 8, 0], [0, 0, 0, 16]]


class TestMemoryStore(TestCase):
    def test_get_set(self):
        store = MemoryStore()
        self.assertIsNone(store.get('key'))
        store.set('key', 'value')
        self.assertEqual(store.get('key'), 'value')
        self.assertIn('key', store)

    def test_initial_values(self):
        self.assertEqual(MemoryStore({'a': 'b'}).get('a'), 'b')


class TestRedisStore(TestCase):
    def setUp(self):
        self.client = fakeredis.FakeRedis(decode_responses=True)

    def test_get_set(self):
        store = RedisStore(self.client)
        self.assertIsNone(store.get('web2048_state'))
        store.set('web2048_state', '{"score": 4}')
        self.assertEqual(store.get('web2048_state'), '{"score": 4}')

    def test_prefix(self):
        store = RedisStore(self.client, prefix='player:7:')
        store.set('web2048_state', 'x')
        self.assertEqual(self.client.get('player:7:web2048_state'), 'x')

    def test_bytes_client(self):
        store = RedisStore(fakeredis.FakeRedis())
        store.set('key', 'value')
        self.assertEqual(store.get('key'), 'value')


class TestSessionRecord(TestCase):
    """Session blob layout and defaulting deserialization."""

    def test_round_trip(self):
        record = SessionRecord(
            board=BOARD,
            score=36,
            best=120,
            game_over=True,
            undo_snapshot=UndoSnapshot(board=BOARD, score=20),
        )
        restored = SessionRecord.from_json(record.to_json())
        self.assertEqual(restored, record)

    def test_camel_case_keys(self):
        payload = json.loads(SessionRecord(board=BOARD).to_json())
        self.assertEqual(set(payload), {'version', 'board', 'score', 'best', 'gameOver', 'undoSnapshot'})
        self.assertEqual(payload['version'], SESSION_VERSION)
        self.assertIsNone(payload['undoSnapshot'])

    def test_defaults(self):
        record = SessionRecord.from_json('{}')
        self.assertIsNone(record.board)
        self.assertEqual(record.score, 0)
        self.assertIsNone(record.best)
        self.assertFalse(record.game_over)
        self.assertIsNone(record.undo_snapshot)

    def test_legacy_prev_state(self):
        raw = json.dumps({'board': BOARD, 'score': 8, 'gameOver': False, 'prevState': {'board': BOARD, 'score': 4}})
        record = SessionRecord.from_json(raw)
        self.assertEqual(record.undo_snapshot.score, 4)
        self.assertEqual(record.version, 1)

    def test_rejects_bad_board(self):
        for board in ([[2, 0], [0, 0, 0]], [[3, 0, 0, 0]] * 4, 'board'):
            with self.assertRaises(ValidationError):
                SessionRecord.from_json(json.dumps({'board': board}))

    def test_rejects_bad_json(self):
        with self.assertRaises(ValidationError):
            SessionRecord.from_json('{"board": ')

    def test_rejects_future_version(self):
        with self.assertRaises(ValidationError):
            SessionRecord.from_json(json.dumps({'version': SESSION_VERSION + 1, 'board': BOARD}))

    def test_rejects_negative_score(self):
        with self.assertRaises(ValidationError):
            SessionRecord.from_json(json.dumps({'board': BOARD, 'score': -1}))


if __name__ == '__main__':
    main()
