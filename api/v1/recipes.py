# api/v1/recipes.py
from __future__ import annotations

from fastapi import APIRouter

from api.v1.schemas import ClusterIn, ClusterOut
from core.recipe_clusters import cluster_recipes

router = APIRouter()


@router.post("/clusters", response_model=ClusterOut)
def clusters(body: ClusterIn) -> ClusterOut:
    return ClusterOut(clusters=cluster_recipes(body.recipes, body.profile, k=body.k))
