#!/usr/bin/env python3
"""
Contract Wizard FastAPI Server
Provides REST API for generating Cairo and Solidity contracts
"""
from typing import Any, Dict, List, Optional, Type, Union

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ValidationError

from wizard.core.config import server_host, server_port
from wizard.core.errors import OptionsError, UnknownContractKind
from wizard.server.client import WizardClient

VERSION = "0.1.0"


# ============================================================================
# Request/Response Models
# ============================================================================

class InfoModel(BaseModel):
    license: str = "MIT"
    security_contact: str = ""


class CairoERC20Request(BaseModel):
    name: str = "MyToken"
    symbol: str = "MTK"
    burnable: bool = False
    pausable: bool = False
    premint: str = "0"
    mintable: bool = False
    access: Union[bool, str] = False
    upgradeable: bool = True
    info: InfoModel = InfoModel()


class SolidityERC20Request(BaseModel):
    name: str = "MyToken"
    symbol: str = "MTK"
    burnable: bool = False
    pausable: bool = False
    premint: str = "0"
    mintable: bool = False
    permit: bool = True
    access: Union[bool, str] = False
    upgradeable: Union[bool, str] = False
    info: InfoModel = InfoModel()


class CairoERC721Request(BaseModel):
    name: str = "MyToken"
    symbol: str = "MTK"
    base_uri: str = ""
    burnable: bool = False
    pausable: bool = False
    mintable: bool = False
    enumerable: bool = False
    access: Union[bool, str] = False
    upgradeable: bool = True
    info: InfoModel = InfoModel()


class SolidityERC721Request(BaseModel):
    name: str = "MyToken"
    symbol: str = "MTK"
    base_uri: str = ""
    enumerable: bool = False
    uri_storage: bool = False
    burnable: bool = False
    pausable: bool = False
    mintable: bool = False
    incremental: bool = False
    votes: Union[bool, str] = False
    access: Union[bool, str] = False
    upgradeable: Union[bool, str] = False
    info: InfoModel = InfoModel()


class CairoAccountRequest(BaseModel):
    name: str = "MyAccount"
    type: str = "stark"
    declare: bool = True
    deploy: bool = True
    pubkey: bool = True
    outside_execution: bool = True
    upgradeable: bool = True
    info: InfoModel = InfoModel()


class CairoCustomRequest(BaseModel):
    name: str = "MyContract"
    pausable: bool = False
    access: Union[bool, str] = False
    upgradeable: bool = True
    info: InfoModel = InfoModel()


class SolidityCustomRequest(BaseModel):
    name: str = "MyContract"
    pausable: bool = False
    access: Union[bool, str] = False
    upgradeable: Union[bool, str] = False
    info: InfoModel = InfoModel()


class GenerateResponse(BaseModel):
    success: bool
    name: Optional[str] = None
    source: Optional[str] = None
    source_hash: Optional[str] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    kinds: Dict[str, List[str]]


REQUEST_MODELS: Dict[str, Dict[str, Type[BaseModel]]] = {
    "cairo": {
        "erc20": CairoERC20Request,
        "erc721": CairoERC721Request,
        "custom": CairoCustomRequest,
        "account": CairoAccountRequest,
    },
    "solidity": {
        "erc20": SolidityERC20Request,
        "erc721": SolidityERC721Request,
        "custom": SolidityCustomRequest,
    },
}


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Contract Wizard API",
    description="Smart contract source generation for Cairo and Solidity",
    version=VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global client instance
wizard_client: Optional[WizardClient] = None


def get_wizard_client() -> WizardClient:
    """Get or create the wizard client instance"""
    global wizard_client
    if wizard_client is None:
        wizard_client = WizardClient()
    return wizard_client


def get_request_model(language: str, kind: str) -> Type[BaseModel]:
    try:
        return REQUEST_MODELS[language][kind]
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown contract kind: {language}/{kind}") from None


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    client = get_wizard_client()
    return {
        "status": "ok",
        "version": VERSION,
        "kinds": {language: client.kinds(language) for language in client.languages()}
    }


@app.get("/api/{language}/{kind}/defaults")
async def defaults(language: str, kind: str):
    """Default options for a contract kind"""
    get_request_model(language, kind)
    return get_wizard_client().defaults(language, kind)


@app.post("/api/{language}/{kind}", response_model=GenerateResponse)
async def generate_contract(language: str, kind: str, options: Dict[str, Any] = Body(default={})):
    """
    Generate a contract.

    Example:
        POST /api/solidity/erc20
        {
            "name": "Coin",
            "mintable": true,
            "access": "roles"
        }
    """
    request_model = get_request_model(language, kind)

    try:
        request = request_model(**options)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        )

    try:
        result = get_wizard_client().generate(language, kind, request.model_dump(exclude_unset=True))
    except OptionsError as e:
        raise HTTPException(status_code=400, detail=e.messages)
    except UnknownContractKind as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "success": True,
        "name": result.name,
        "source": result.source,
        "source_hash": result.source_hash
    }


# ============================================================================
# Run Server
# ============================================================================

def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    import uvicorn

    host = host or server_host()
    port = port or server_port()

    print("=" * 60)
    print("Contract Wizard API Server")
    print("=" * 60)
    print(f"Starting server on http://{host}:{port}")
    print(f"API docs: http://{host}:{port}/docs")
    print("=" * 60)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
