"""
Database
========

In memory data layer for the starter schema. Records are plain dataclasses
and the `Database` object exposes the accessor functions the resolvers use::

    db = Database()
    viewer = db.get_viewer()
    ada = db.add_person("Ada", "Lovelace")
    db.make_friends(ada.id, ["Babbage"])

Nothing here knows about GraphQL or global ids, resolvers translate
between the two.
"""

import dataclasses
import itertools
import logging
import typing

LOG = logging.getLogger(__name__)

LocalId = typing.Union[str, int]


@dataclasses.dataclass
class User:
    id: str
    name: str


@dataclasses.dataclass
class Widget:
    id: str
    name: str


@dataclasses.dataclass
class Person:
    id: str
    firstName: str
    lastName: str
    friends: typing.List[str] = dataclasses.field(default_factory=list)


Record = typing.Union[User, Widget, Person]

VIEWER = User(id="1", name="Anonymous")

WIDGET_NAMES = ["What's-it", "Who's-it", "How's-it"]

PEOPLE = [
    ("Grace", "Hopper", ["Alan"]),
    ("Alan", "Turing", ["Grace", "Charles"]),
    ("Charles", "Babbage", []),
]


class Database:
    """Container for users, widgets and people.

    :param seed: Populate the starter widgets and people, pass `False` for
        an empty store. The viewer always exists.
    """

    users: typing.Dict[str, User]
    widgets: typing.Dict[str, Widget]
    people: typing.Dict[str, Person]

    def __init__(self, seed: bool = True):
        self.users = {}
        self.widgets = {}
        self.people = {}
        self._person_ids = itertools.count(1)

        viewer = dataclasses.replace(VIEWER)
        self.users[viewer.id] = viewer
        if seed:
            self.seed()

    def seed(self) -> None:
        for index, name in enumerate(WIDGET_NAMES):
            widget = Widget(id=str(index), name=name)
            self.widgets[widget.id] = widget

        for first_name, last_name, friends in PEOPLE:
            person = self.add_person(first_name, last_name)
            person.friends = list(friends)

    def get_user(self, id: LocalId) -> typing.Optional[User]:
        return self.users.get(str(id))

    def get_viewer(self) -> User:
        return self.users[VIEWER.id]

    def get_widget(self, id: LocalId) -> typing.Optional[Widget]:
        return self.widgets.get(str(id))

    def get_widgets(self) -> typing.List[Widget]:
        return list(self.widgets.values())

    def get_person(self, id: LocalId) -> typing.Optional[Person]:
        return self.people.get(str(id))

    def get_people(self) -> typing.List[Person]:
        return list(self.people.values())

    def add_person(self, first_name: str, last_name: str) -> Person:
        person_id = str(next(self._person_ids))
        person = Person(id=person_id, firstName=first_name, lastName=last_name)
        self.people[person_id] = person
        LOG.debug(f"Added person {person_id}: {first_name} {last_name}")
        return person

    def make_friends(
        self,
        id: LocalId,
        friends: typing.Optional[typing.Iterable[str]],
    ) -> typing.Optional[Person]:
        """Replace the friend list of a person, last write wins.

        Returns `None` when the person does not exist.
        """
        person = self.get_person(id)
        if person is None:
            LOG.debug(f"Unable to update friends, person {id} not found")
            return None

        person.friends = list(friends or [])
        return person
