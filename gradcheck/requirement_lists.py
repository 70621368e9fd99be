"""
Course name tables for name-based requirements.

JABEE accreditation and the "情報科学" (information science) education
program define their requirements as lists of course names. The lists are
kept here as plain data, separate from the rule logic in gradcheck.rules,
so they can be updated when the curriculum changes without touching code.

Names must match the 授業科目 column of the syllabus CSV exactly.
"""

# =============================================================================
# JABEE: GENERAL EDUCATION
# =============================================================================

# Humanities and social sciences (6 or more courses)
HUMANITIES_SOCIAL_SCIENCE_COURSES = (
    "国語Ⅰ",
    "国語Ⅱ",
    "国語Ⅲ",
    "歴史Ⅰ",
    "歴史Ⅱ",
    "地理",
    "政治・経済",
    "倫理",
    "法学",
    "経済学",
    "哲学",
    "歴史学",
    "技術史",
    "技術者倫理",
)

# English (6 or more courses)
ENGLISH_COURSES = (
    "英語Ⅰ",
    "英語Ⅱ",
    "英語Ⅲ",
    "英語Ⅳ",
    "英語Ⅴ",
    "英語演習Ⅰ",
    "英語演習Ⅱ",
    "英語演習Ⅲ",
    "総合英語Ⅰ",
    "総合英語Ⅱ",
    "科学技術英語",
)

# Mathematics and natural sciences (10 or more courses)
MATH_SCIENCE_COURSES = (
    "基礎数学Ⅰ",
    "基礎数学Ⅱ",
    "線形代数Ⅰ",
    "線形代数Ⅱ",
    "微分積分Ⅰ",
    "微分積分Ⅱ",
    "微分積分Ⅲ",
    "応用数学Ⅰ",
    "応用数学Ⅱ",
    "確率統計",
    "物理Ⅰ",
    "物理Ⅱ",
    "応用物理Ⅰ",
    "応用物理Ⅱ",
    "化学Ⅰ",
    "化学Ⅱ",
    "生物",
    "統計学",
)

# Information technology (2 or more courses)
INFORMATION_TECHNOLOGY_COURSES = (
    "情報リテラシー",
    "情報処理",
    "プログラミングⅠ",
    "プログラミングⅡ",
)


# =============================================================================
# JABEE: SPECIALTY COURSE GROUPS
# =============================================================================

# 1. Computer systems: computer architecture must be taken
COMPUTER_ARCHITECTURE_COURSE = "コンピュータアーキテクチャ"

# 2. Computer systems (5 or more courses)
COMPUTER_SYSTEM_COURSES = (
    "論理回路Ⅰ",
    "論理回路Ⅱ",
    "計算機工学",
    "コンピュータアーキテクチャ",
    "オペレーティングシステム",
    "組込みシステム",
    "コンピュータシステム設計",
    "組込みシステム特論",
)

# 3. System programming: enroll in all three, earn 2 or more
SYSTEM_PROGRAMMING_COURSES = (
    "アルゴリズムとデータ構造",
    "プログラミング言語論",
    "ソフトウェア設計",
)

# 4. System programming, full list (5 or more courses)
SYSTEM_PROGRAMMING_COURSES_FULL = (
    "アルゴリズムとデータ構造",
    "プログラミング言語論",
    "ソフトウェア設計",
    "システムプログラム",
    "ソフトウェア工学",
    "データベース",
    "コンパイラ",
)

# 5. Information communication and signal processing (4 or more courses)
INFORMATION_COMMUNICATION_COURSES = (
    "情報ネットワークⅠ",
    "情報ネットワークⅡ",
    "情報ネットワーク論",
    "情報理論",
    "通信工学",
    "信号処理",
    "ディジタル信号処理",
    "画像処理",
    "情報セキュリティ",
)

# 6. Computer applications (3 or more courses)
COMPUTER_APPLICATION_COURSES = (
    "知能メディア処理",
    "応用情報システム",
    "パターン情報処理",
    "知識情報工学",
    "人工知能",
    "コンピュータグラフィックス",
)

# 7. Mathematical science: 情報数学Ⅰ or 情報数学Ⅱ (1 or more)
MATHEMATICAL_SCIENCE_COURSES = (
    "情報数学Ⅰ",
    "情報数学Ⅱ",
)

# 8. Mathematical science, including the elective-required courses (4 or more)
MATHEMATICAL_SCIENCE_COURSES_FULL = (
    "数値解析",
    "情報数学Ⅰ",
    "情報数学Ⅱ",
    "システム工学",
    "情報数学特論I",
    "情報数学特論Ⅱ",
)

# 9. Experiments and practice: every course is required
EXPERIMENT_PRACTICE_REQUIRED_COURSES = (
    "エンジニアリングデザインⅡ",
    "情報工学ゼミⅡ",
    "情報科学実験",
    "卒業研究",
    "特別研究Ⅰ",
    "特別研究Ⅱ",
)


# =============================================================================
# 情報科学 (INFORMATION SCIENCE) EDUCATION PROGRAM
# =============================================================================

# All 19 courses are required
INFORMATION_SCIENCE_REQUIRED_COURSES = (
    "コンピュータシステム設計",
    "システムプログラム",
    "情報ネットワーク論",
    "統計学",
    "エンジニアリングデザインⅡ",
    "情報工学ゼミⅡ",
    "卒業研究",
    "総合英語Ⅰ",
    "総合英語Ⅱ",
    "技術者倫理",
    "歴史学",
    "技術史",
    "組込みシステム特論",
    "ディジタル信号処理",
    "応用情報システム",
    "知識情報工学",
    "情報科学実験",
    "特別研究Ⅰ",
    "特別研究Ⅱ",
)
