import asyncio
from brand_identity.services.init_services import init_services
from brand_identity.services.memory_service import MemoryService


class MemoryResetter:
    def __init__(self):
        self.memory_service = None

    async def reset_memory(self):
        store = await init_services()
        self.memory_service = MemoryService(store)
        await self.memory_service.reset()
        print("Memory documents reset to defaults.")

    async def run(self):
        try:
            await self.reset_memory()
        except Exception as e:
            print(f"Main process failed: {str(e)}")
            raise


if __name__ == "__main__":
    resetter = MemoryResetter()
    asyncio.run(resetter.run())
