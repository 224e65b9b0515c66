"""
Tests pour l'adapter InMemoryMessageRepository.

Verifie le contrat du port (save / find_by_id) et la surete en acces concurrent.
"""

from concurrent.futures import ThreadPoolExecutor

from hexamessage.core.entities.message import Message
from hexamessage.core.ports.repositories import IMessageRepository
from hexamessage.infrastructure.persistence import InMemoryMessageRepository


class TestPortContract:
    """Tests du contrat IMessageRepository."""

    def test_implements_port(self, repository):
        assert isinstance(repository, IMessageRepository)

    def test_save_returns_message(self, repository, sample_message):
        """save retourne l'entite stockee."""
        assert repository.save(sample_message) is sample_message

    def test_find_by_id_after_save(self, repository, sample_message):
        """Lecture de ses propres ecritures."""
        repository.save(sample_message)
        assert repository.find_by_id("123") is sample_message

    def test_find_missing_returns_none(self, repository):
        """Un id absent donne None, sans exception."""
        assert repository.find_by_id("nonexistent") is None

    def test_save_same_id_replaces_entry(self, repository):
        """Derniere ecriture gagnante pour un meme id."""
        repository.save(Message(id="1", content="first"))
        repository.save(Message(id="1", content="second"))

        assert repository.find_by_id("1").content == "second"
        assert len(repository) == 1

    def test_instances_do_not_share_storage(self, sample_message):
        """Chaque instance a son propre stockage volatile."""
        first = InMemoryMessageRepository()
        second = InMemoryMessageRepository()
        first.save(sample_message)

        assert second.find_by_id(sample_message.id) is None


class TestConcurrentAccess:
    """Tests d'acces concurrent depuis plusieurs threads."""

    def test_parallel_saves_are_all_stored(self, repository):
        """Aucune ecriture perdue avec 8 workers."""
        messages = [Message(id=str(i), content=f"m{i}") for i in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(repository.save, messages))

        assert repository.count() == 500
        assert all(repository.find_by_id(m.id) == m for m in messages)

    def test_parallel_reads_and_writes(self, repository):
        """Les lectures concurrentes voient les ecritures terminees."""
        def write_then_read(i: int) -> bool:
            message = repository.save(Message(id=f"id-{i}", content=str(i)))
            return repository.find_by_id(message.id).content == str(i)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(write_then_read, range(200)))

        assert all(results)
