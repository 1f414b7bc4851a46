"""
Shared fixtures: a miniature PMDO project on disk.

Layout:
    DataGenerator/Data/ItemInfo.cs              items (source, with BOM)
    DataGenerator/Data/Skills/SkillInfo.cs      documented classes, no entries
    DataGenerator/Data/Skills/SkillsPMD.cs      skills 1-2
    DataGenerator/Data/Skills/SkillsGen5Plus.cs skill 0 and 3
    DumpAsset/Data/Monster/index.idx            monsters (snapshot, with companions)
    DumpAsset/Data/Element/index.idx            elements (snapshot)
"""

import json
import tempfile
from pathlib import Path

import pytest

from mcp_pmdo.config import ProjectPaths


ITEM_INFO = """using System;
using RogueEssence.Data;

namespace DataGenerator.Data
{
    /// <summary>
    /// Generates item data.
    /// </summary>
    public static class ItemInfo
    {
        public static (string, ItemData) GetItemData(int ii)
        {
            string fileName = "";
            ItemData item = new ItemData();
            if (ii == 0)
            {
                item.Sprite = "Empty";
            }
            else if (ii == 1)
            {
                item.Name = new LocalText("Apple");
                item.Desc = new LocalText("A food item that somewhat fills the belly.");
                item.Sprite = "Apple_Red";
                item.Price = 50;
                fileName = "food_apple";
            }
            else if (ii == 2)
            {
                item.Name = new LocalText("Big Apple");
                item.Desc = new LocalText("A food item that fills the belly.");
                item.Price = 150;
            }
            else if (ii == 3)
            {
                item.Name = new LocalText("**Golden Apple");
                item.Desc = new LocalText("A food item that fills the belly completely.");
            }
            else if (ii == 4)
            {
                item.Name = new LocalText("-Oran Berry");
                item.Desc = new LocalText("Restores 100 HP.");
            }
            else if (ii == 5)
            {
                fileName = "berry_sitrus";
                item.Name = new LocalText("=Sitrus Berry");
            }
            return (fileName, item);
        }
    }
}
"""

SKILL_INFO = """using System;

namespace DataGenerator.Data
{
    /// <summary>
    /// Provides skill data generation.
    /// </summary>
    /// <remarks>
    /// Split across partial files.
    /// </remarks>
    public partial class SkillInfo
    {
        /// <summary>
        /// The maximum number of skills.
        /// </summary>
        public const int MAX_SKILLS = 901;

        private static int counter;

        /// <summary>Display name of the skill.</summary>
        public string Label { get; set; }

        /// <summary>
        /// Builds the data for one skill.
        /// </summary>
        public static (string, SkillData) GetSkillData(
            int ii,
            bool translate)
        {
            return ("", null);
        }

        private static void Helper()
        {
        }

        /// <inheritdoc/>
        public override string ToString()
        {
            return "SkillInfo";
        }
    }

    /// <summary>
    /// Builder for skill effects. See <see cref="SkillInfo"/>.
    /// </summary>
    public class SkillBuilder : BaseBuilder, IDisposable
    {
        public int Power, Accuracy;

        public void Dispose()
        {
        }
    }
}
"""

SKILLS_PMD = """namespace DataGenerator.Data
{
    public partial class SkillInfo
    {
        public static (string, SkillData) GetSkillDataPMD(int ii)
        {
            SkillData skill = new SkillData();
            if (ii == 1)
            {
                skill.Name = new LocalText("Pound");
                skill.Desc = new LocalText("The target is physically pounded with a long tail or a foreleg.");
            }
            else if (ii == 2)
            {
                skill.Name = new LocalText("Karate Chop");
                skill.Desc = new LocalText("The target is attacked with a sharp chop.");
            }
            return ("", skill);
        }
    }
}
"""

SKILLS_GEN5 = """namespace DataGenerator.Data
{
    public partial class SkillInfo
    {
        public static (string, SkillData) GetSkillDataGen5(int ii)
        {
            SkillData skill = new SkillData();
            if (ii == 0)
            {
                skill.Name = new LocalText("**None");
            }
            else if (ii == 3)
            {
                skill.Name = new LocalText("Hone Claws");
                skill.Desc = new LocalText("The user sharpens its claws to boost its Attack stat and accuracy.");
            }
            return ("", skill);
        }
    }
}
"""

MONSTER_INDEX = {
    "Object": {
        "$type": "RogueEssence.Data.EntryDataIndex, RogueEssence",
        "pikachu": {"Name": {"DefaultText": "Pikachu"}, "Released": True, "SortOrder": 25},
        "bulbasaur": {"Name": {"DefaultText": "Bulbasaur"}, "Released": True, "SortOrder": 1},
        "missingno": {"Name": {"DefaultText": "Missingno"}, "Released": False, "SortOrder": 0},
        "eevee": {"Name": {"DefaultText": "Eevee"}, "Released": True, "SortOrder": 133},
    }
}

ELEMENT_INDEX = {
    "Object": {
        "$type": "RogueEssence.Data.EntryDataIndex, RogueEssence",
        "water": {"Name": {"DefaultText": "Water"}, "Released": True, "SortOrder": 11},
        "fire": {"Name": {"DefaultText": "Fire"}, "Released": True, "SortOrder": 10},
        "none": {"Name": {"DefaultText": "???"}, "Released": True, "SortOrder": 0},
    }
}


def write_project(root: Path) -> None:
    """Lay out the miniature project under root."""
    data_dir = root / "DataGenerator" / "Data"
    skills_dir = data_dir / "Skills"
    skills_dir.mkdir(parents=True)

    (data_dir / "ItemInfo.cs").write_text(ITEM_INFO, encoding="utf-8-sig")
    (skills_dir / "SkillInfo.cs").write_text(SKILL_INFO, encoding="utf-8")
    (skills_dir / "SkillsPMD.cs").write_text(SKILLS_PMD, encoding="utf-8")
    (skills_dir / "SkillsGen5Plus.cs").write_text(SKILLS_GEN5, encoding="utf-8")

    monster_dir = root / "DumpAsset" / "Data" / "Monster"
    monster_dir.mkdir(parents=True)
    (monster_dir / "index.idx").write_text(json.dumps(MONSTER_INDEX), encoding="utf-8-sig")
    (monster_dir / "pikachu.json").write_text(
        json.dumps({"Object": {"Title": {"DefaultText": "Mouse Pokemon"}}}), encoding="utf-8-sig"
    )
    (monster_dir / "bulbasaur.json").write_text("{not json", encoding="utf-8")

    element_dir = root / "DumpAsset" / "Data" / "Element"
    element_dir.mkdir(parents=True)
    (element_dir / "index.idx").write_text(json.dumps(ELEMENT_INDEX), encoding="utf-8")


@pytest.fixture
def project_root():
    """Create a temporary PMDO project."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir).resolve()
        write_project(root)
        yield root


@pytest.fixture
def paths(project_root):
    """ProjectPaths for the temporary project."""
    return ProjectPaths(root=project_root)


@pytest.fixture
def empty_paths():
    """ProjectPaths for a directory with no PMDO files at all."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield ProjectPaths(root=Path(tmpdir).resolve())
