import asyncio
import argparse
from brand_identity.models.enums import MemoryFile
from brand_identity.services.init_services import init_services
from brand_identity.services.memory_service import MemoryService
from brand_identity.services.retention_analyzer import analyze_retention_timeline


class RetentionBackfillService:
    def __init__(self, memory_service: MemoryService):
        self.memory_service = memory_service

    async def backfill(self, force: bool = False) -> int:
        """Recompute retention timelines from stored chapters and highlights"""
        content = await self.memory_service.read(MemoryFile.CONTENT)
        analyses = content.get("videoAnalyses") or []
        if not analyses:
            print("No video analyses found")
            return 0

        updated = 0
        for idx, analysis in enumerate(analyses, 1):
            video_id = analysis.get("id")
            try:
                if analysis.get("retentionTimeline") and not force:
                    print(f"⏭️ Skipping {video_id} - timeline already present")
                    continue

                print(f"Processing {video_id} ({idx}/{len(analyses)})")
                timeline = analyze_retention_timeline(
                    analysis.get("chapters"), analysis.get("highlights")
                )
                analysis["retentionTimeline"] = [
                    segment.model_dump(mode="json") for segment in timeline
                ]
                updated += 1
                print(f"✅ Updated {video_id} - {len(timeline)} segments")

            except Exception as e:
                print(f"❌ Error processing {video_id}: {str(e)}")
                continue

        if updated:
            await self.memory_service.write(
                MemoryFile.CONTENT, {"videoAnalyses": analyses}
            )
        return updated


async def main(force: bool):
    try:
        store = await init_services()
        service = RetentionBackfillService(MemoryService(store))

        print(f"Starting retention backfill: force={force}")
        updated = await service.backfill(force=force)
        print(f"✅ Backfill completed, {updated} videos updated")

    except Exception as e:
        print(f"❌ Main process failed: {str(e)}")
        raise


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Recompute retention timelines for stored video analyses"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Recompute timelines that already exist",
    )
    args = parser.parse_args()
    asyncio.run(main(args.force))
