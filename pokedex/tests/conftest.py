import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pokedex.app.cache import CategoryCache
from pokedex.app.deps import get_service
from pokedex.app.gateway import PokeApiGateway
from pokedex.app.main import app
from pokedex.app.service import PokedexService

BASE = "https://pokeapi.test/api/v2"


def ref(name: str, resource: str, entity_id: int) -> dict:
    return {"name": name, "url": f"{BASE}/{resource}/{entity_id}/"}


def listing(resource: str, entries: list[tuple[str, int]]) -> dict:
    return {
        "count": len(entries),
        "results": [ref(name, resource, entity_id) for name, entity_id in entries],
    }


def lang(code: str) -> dict:
    return {"name": code, "url": f"{BASE}/language/{code}/"}


def machine(machine_id: int, move: tuple[str, int], item: tuple[str, int]) -> dict:
    return {
        "id": machine_id,
        "move": ref(move[0], "move", move[1]),
        "item": ref(item[0], "item", item[1]),
    }


def move(name: str, power, accuracy, move_type: str, damage_class: str | None) -> dict:
    return {
        "name": name,
        "power": power,
        "accuracy": accuracy,
        "type": {"name": move_type},
        "damage_class": {"name": damage_class} if damage_class else None,
        "flavor_text_entries": [
            {"flavor_text": "Ein Angriff.", "language": lang("de")},
            {"flavor_text": f"A {name}\nattack.", "language": lang("en")},
        ],
    }


def default_routes() -> dict:
    return {
        "pokemon?limit=151": listing(
            "pokemon",
            [
                ("bulbasaur", 1),
                ("ivysaur", 2),
                ("venusaur", 3),
                ("charmander", 4),
                ("pikachu", 25),
                ("sandshrew", 27),
                ("sandslash", 28),
                ("sawk", 539),
            ],
        ),
        "location?limit=50": listing(
            "location", [("pallet-town", 1), ("viridian-city", 2), ("safari-zone", 3)]
        ),
        "item?limit=50": listing(
            "item", [("master-ball", 1), ("safari-ball", 5), ("potion", 17)]
        ),
        "ability?limit=100": listing(
            "ability", [("stench", 1), ("sand-veil", 8), ("sand-stream", 45)]
        ),
        "nature?limit=25": listing(
            "nature", [("hardy", 1), ("bold", 2), ("sassy", 20)]
        ),
        "machine?limit=100": listing(
            "machine", [("", 1), ("", 2), ("", 3), ("", 4)]
        ),
        "machine/1": machine(1, ("mega-punch", 5), ("tm01", 305)),
        "machine/2": machine(2, ("body-slam", 34), ("tm08", 312)),
        "machine/3": machine(3, ("cut", 15), ("hm01", 420)),
        "machine/4": 500,
        "move/5": move("mega-punch", 80, 85, "normal", "physical"),
        "move/34": move("body-slam", 85, 100, "normal", "physical"),
        "move/15": move("cut", 50, 95, "normal", "physical"),
        "item/305": {"name": "tm01", "sprites": {"default": f"{BASE}/tm01.png"}},
        "item/312": {"name": "tm08", "sprites": {"default": None}},
        "item/420": {"name": "hm01", "sprites": {"default": None}},
        "pokemon/25": {
            "id": 25,
            "name": "pikachu",
            "species": ref("pikachu", "pokemon-species", 25),
            "stats": [
                {"base_stat": 35, "stat": {"name": "hp"}},
                {"base_stat": 55, "stat": {"name": "attack"}},
            ],
            "types": [{"slot": 1, "type": {"name": "electric"}}],
            "sprites": {
                "front_default": f"{BASE}/sprites/25.png",
                "other": {"official-artwork": {"front_default": None}},
            },
        },
        "pokemon-species/25": {
            "flavor_text_entries": [
                {"flavor_text": "ピカチュウ", "language": lang("ja")},
                {
                    "flavor_text": "When several of\nthese POKéMON\fgather,\rtheir",
                    "language": lang("en"),
                },
                {"flavor_text": "Second entry.", "language": lang("en")},
            ]
        },
        "pokemon/1": {
            "id": 1,
            "name": "bulbasaur",
            "species": ref("bulbasaur", "pokemon-species", 1),
            "stats": [
                {"base_stat": 45, "stat": {"name": "hp"}},
                {"base_stat": 49, "stat": {"name": "attack"}},
                {"base_stat": 49, "stat": {"name": "defense"}},
                {"base_stat": 65, "stat": {"name": "special-attack"}},
                {"base_stat": 45, "stat": {"name": "speed"}},
            ],
            "types": [
                {"slot": 1, "type": {"name": "grass"}},
                {"slot": 2, "type": {"name": "poison"}},
            ],
            "sprites": {
                "front_default": f"{BASE}/sprites/1.png",
                "other": {"official-artwork": {"front_default": f"{BASE}/art/1.png"}},
            },
        },
        "pokemon-species/1": {"flavor_text_entries": []},
        "location/3": {"id": 3, "name": "safari-zone", "region": {"name": "kanto"}},
        "location-area?location=3": listing(
            "location-area", [("safari-zone-area-1", 7)]
        ),
        "location-area/7": {
            "pokemon_encounters": [
                {"pokemon": {"name": name}}
                for name in [
                    "nidoran-f",
                    "nidoran-f",
                    "rhyhorn",
                    "exeggcute",
                    "rhyhorn",
                    "venonat",
                    "kangaskhan",
                    "scyther",
                    "pinsir",
                    "chansey",
                    "tauros",
                    "dratini",
                    "dragonair",
                ]
            ]
        },
        "location/1": {"id": 1, "name": "pallet-town", "region": None},
        "location-area?location=1": 500,
        "item/17": {
            "name": "potion",
            "cost": 200,
            "category": {"name": "healing"},
            "flavor_text_entries": [
                {"text": "Restores 20 HP.", "language": lang("fr")},
                {"text": "A spray-type\nmedicine.", "language": lang("en")},
            ],
            "sprites": {"default": f"{BASE}/items/potion.png"},
        },
        "item/1": {
            "name": "master-ball",
            "cost": 0,
            "category": {"name": "special-balls"},
            "flavor_text_entries": [],
            "sprites": {"default": None},
        },
        "ability/8": {
            "name": "sand-veil",
            "effect_entries": [
                {"effect": "Erhöht Ausweichen.", "language": lang("de")},
                {
                    "effect": "Increases evasion\nin a sandstorm.",
                    "language": lang("en"),
                },
            ],
            "pokemon": [
                {"pokemon": {"name": name}}
                for name in [
                    "sandshrew",
                    "sandslash",
                    "diglett",
                    "dugtrio",
                    "gligar",
                    "phanpy",
                    "donphan",
                    "larvitar",
                    "cacnea",
                    "cacturne",
                ]
            ],
            "generation": {"name": "generation-iii"},
        },
        "nature/1": {
            "name": "hardy",
            "increased_stat": None,
            "decreased_stat": None,
            "likes_flavor": None,
            "hates_flavor": None,
        },
        "nature/2": {
            "name": "bold",
            "increased_stat": {"name": "defense"},
            "decreased_stat": {"name": "attack"},
            "likes_flavor": {"name": "sour"},
            "hates_flavor": {"name": "spicy"},
        },
    }


class FakePokeApi:
    """Serves canned JSON keyed by path (plus query string, when present).

    A key mapped to an int answers with that status code; unknown keys 404.
    """

    def __init__(self, routes: dict) -> None:
        self.routes = routes
        self.calls: list[str] = []

    def key_for(self, request: httpx.Request) -> str:
        path = request.url.path.removeprefix("/api/v2/").strip("/")
        params = str(request.url.params)
        return f"{path}?{params}" if params else path

    def handler(self, request: httpx.Request) -> httpx.Response:
        key = self.key_for(request)
        self.calls.append(key)
        body = self.routes.get(key)
        if body is None:
            return httpx.Response(404, json={"detail": "Not found"})
        if isinstance(body, int):
            return httpx.Response(body, text="upstream failure")
        return httpx.Response(200, json=body)

    def count(self, key: str) -> int:
        return self.calls.count(key)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_api():
    return FakePokeApi(default_routes())


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def gateway(fake_api):
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    yield PokeApiGateway(base_url=BASE, client=http)
    await http.aclose()


@pytest.fixture
def service(gateway, clock):
    return PokedexService(gateway, CategoryCache(ttl=300, clock=clock))


@pytest_asyncio.fixture
async def client(service):
    app.dependency_overrides[get_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
