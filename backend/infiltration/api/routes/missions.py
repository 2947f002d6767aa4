"""
Mission Routes

REST API endpoints for mission buildings:
- Create/list/get/delete missions
- Traverse the building
- Ask for entry points, routes and med kits
"""

from fastapi import APIRouter, HTTPException, Query, Path, Body
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Any, Tuple
import logging
import uuid

from ...core import (
    Agent, GraphError, MedKit, MissionDefinition,
    PathingConfig, RoutePlanner, TraversalOrder, build_network
)
from ...core.mission import EnemyPlacement, ItemPlacement
from ...core.enums import ItemType

logger = logging.getLogger(__name__)

router = APIRouter()

config = PathingConfig()


# =============================================================================
# Pydantic Models for Request/Response
# =============================================================================

class EnemyModel(BaseModel):
    """Enemy placed in a room"""
    name: str
    power: int = Field(..., ge=0)
    room: str


class ItemModel(BaseModel):
    """Item placed in a room"""
    type: str = Field(..., description="MEDKIT or KEVLAR")
    points: int = Field(..., ge=0)
    room: str
    name: str = ""


class CreateMissionRequest(BaseModel):
    """Request model for creating a new mission"""
    code: str
    version: int = 1
    rooms: List[str] = Field(..., min_length=1)
    connections: List[Tuple[str, str]] = Field(default_factory=list)
    enemies: List[EnemyModel] = Field(default_factory=list)
    items: List[ItemModel] = Field(default_factory=list)
    entries_exits: List[str] = Field(default_factory=list)
    target: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "code": "pr-1",
            "rooms": ["Heliport", "Hall", "Lab"],
            "connections": [["Heliport", "Hall"], ["Hall", "Lab"]],
            "enemies": [{"name": "Guard", "power": 40, "room": "Hall"}],
            "items": [{"type": "MEDKIT", "points": 30, "room": "Lab"}],
            "entries_exits": ["Heliport"],
            "target": "Lab"
        }
    })

    def to_definition(self) -> MissionDefinition:
        return MissionDefinition(
            code=self.code,
            version=self.version,
            rooms=list(self.rooms),
            connections=[(a, b) for a, b in self.connections],
            enemies=[EnemyPlacement(name=e.name, power=e.power, room=e.room) for e in self.enemies],
            items=[
                ItemPlacement(item_type=ItemType.from_name(i.type), points=i.points, room=i.room, name=i.name)
                for i in self.items
            ],
            entries_exits=list(self.entries_exits),
            target=self.target,
        )


class AgentModel(BaseModel):
    """Agent state used to derive route costs"""
    name: str = "agent"
    power: int = Field(..., ge=0)
    health: int = config.max_health
    max_health: int = Field(default=config.max_health, gt=0)
    medkits: List[int] = Field(default_factory=list, description="Recovery points of carried kits")

    def to_agent(self) -> Agent:
        return Agent(
            name=self.name,
            power=self.power,
            health=self.health,
            max_health=self.max_health,
            max_medkits=max(config.max_medkits, len(self.medkits)),
            medkits=[MedKit(name=f"kit_{i + 1}", recovery_points=p) for i, p in enumerate(self.medkits)],
        )


class RouteRequest(BaseModel):
    """Request model for a route query"""
    agent: AgentModel
    start: str
    target: Optional[str] = Field(default=None, description="Defaults to the mission target")


class LocationRequest(BaseModel):
    """Request model for queries from the agent's current room"""
    agent: AgentModel
    start: str


class RoomResponse(BaseModel):
    """Response model for a room"""
    index: int
    name: str
    is_entry_exit: bool
    is_target: bool
    enemies: List[Dict[str, Any]]
    items: List[Dict[str, Any]]
    connected_rooms: List[str]


class MissionResponse(BaseModel):
    """Response model for a mission"""
    mission_id: str
    code: str
    version: int
    is_connected: bool
    rooms: List[RoomResponse]


class RouteResponse(BaseModel):
    """Response model for a route"""
    start: str
    destination: str
    path: List[str]
    weight: Optional[float] = None
    next_hop: Optional[str] = None


class EntryPointResponse(BaseModel):
    """Response model for the best entry point"""
    room: str
    weight: float
    route: List[str]


# =============================================================================
# Mission Storage (In-Memory)
# =============================================================================

missions_store: Dict[str, Dict] = {}


def get_mission(mission_id: str) -> Dict:
    if mission_id not in missions_store:
        raise HTTPException(status_code=404, detail="Mission not found")
    return missions_store[mission_id]


def mission_to_response(mission_id: str, data: Dict) -> MissionResponse:
    """Convert a stored mission to API response"""
    network = data["planner"].network
    definition: MissionDefinition = data["definition"]

    rooms = []
    for index, room in enumerate(network.get_vertices()):
        rooms.append(RoomResponse(
            index=index,
            name=room.name,
            is_entry_exit=room.is_entry_exit,
            is_target=room.is_target,
            enemies=[enemy.to_dict() for enemy in room.enemies],
            items=[item.to_dict() for item in room.items],
            connected_rooms=[r.name for r in network.get_adjacent_vertices(room)],
        ))

    return MissionResponse(
        mission_id=mission_id,
        code=definition.code,
        version=definition.version,
        is_connected=network.is_connected(),
        rooms=rooms,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@router.post("/", response_model=MissionResponse)
async def create_mission(request: CreateMissionRequest):
    """
    Build a mission building from its definition.
    """
    try:
        definition = request.to_definition()
        network = build_network(definition, config)
    except (GraphError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    mission_id = str(uuid.uuid4())
    missions_store[mission_id] = {
        "definition": definition,
        "planner": RoutePlanner(network),
    }
    logger.info("Created mission %s (%s)", mission_id, definition.code)

    return mission_to_response(mission_id, missions_store[mission_id])


@router.get("/", response_model=List[Dict[str, Any]])
async def list_missions():
    """
    List all missions.
    """
    missions = []
    for mission_id, data in missions_store.items():
        definition = data["definition"]
        missions.append({
            "mission_id": mission_id,
            "code": definition.code,
            "version": definition.version,
            "room_count": data["planner"].network.size(),
        })
    return missions


@router.get("/{mission_id}", response_model=MissionResponse)
async def read_mission(mission_id: str = Path(..., description="Mission ID")):
    """
    Get a mission's building.
    """
    return mission_to_response(mission_id, get_mission(mission_id))


@router.delete("/{mission_id}")
async def delete_mission(mission_id: str = Path(..., description="Mission ID")):
    """
    Delete a mission.
    """
    get_mission(mission_id)
    del missions_store[mission_id]
    return {"message": "Mission deleted", "mission_id": mission_id}


@router.get("/{mission_id}/traversal", response_model=List[str])
async def traverse_mission(
    mission_id: str = Path(..., description="Mission ID"),
    start: str = Query(..., description="Room to start from"),
    order: TraversalOrder = Query(default=TraversalOrder.BFS, description="bfs or dfs")
):
    """
    Rooms reachable from start, in traversal order.
    """
    network = get_mission(mission_id)["planner"].network
    try:
        if order == TraversalOrder.DFS:
            rooms = network.iterator_dfs(network.get_room(start))
        else:
            rooms = network.iterator_bfs(network.get_room(start))
    except GraphError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [room.name for room in rooms]


@router.post("/{mission_id}/entry-point", response_model=EntryPointResponse)
async def best_entry_point(
    mission_id: str = Path(..., description="Mission ID"),
    agent: AgentModel = Body(...)
):
    """
    Entry point with the cheapest route to the target for this agent.
    """
    planner: RoutePlanner = get_mission(mission_id)["planner"]
    snapshot = agent.to_agent().snapshot()
    try:
        room, weight = planner.find_best_entry_point(snapshot)
        advice = planner.advisory_route(room, planner.find_target_room(), snapshot)
    except GraphError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return EntryPointResponse(
        room=room.name,
        weight=weight,
        route=[r.name for r in advice.path],
    )


@router.post("/{mission_id}/route", response_model=RouteResponse)
async def advisory_route(
    mission_id: str = Path(..., description="Mission ID"),
    request: RouteRequest = Body(...)
):
    """
    Cheapest route from the agent's room to a destination.
    """
    planner: RoutePlanner = get_mission(mission_id)["planner"]
    try:
        start = planner.network.get_room(request.start)
        if request.target is None:
            destination = planner.find_target_room()
        else:
            destination = planner.network.get_room(request.target)
        advice = planner.advisory_route(start, destination, request.agent.to_agent())
    except GraphError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = advice.to_dict()
    return RouteResponse(**result)


@router.post("/{mission_id}/medkit", response_model=Optional[RouteResponse])
async def closest_medkit(
    mission_id: str = Path(..., description="Mission ID"),
    request: LocationRequest = Body(...)
):
    """
    Route to the cheapest room holding a med kit, or null if none is left.
    """
    planner: RoutePlanner = get_mission(mission_id)["planner"]
    try:
        start = planner.network.get_room(request.start)
        advice = planner.closest_medkit_room(start, request.agent.to_agent())
    except GraphError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if advice is None:
        return None
    return RouteResponse(**advice.to_dict())
