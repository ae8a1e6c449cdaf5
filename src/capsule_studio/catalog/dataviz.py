"""Data visualisation capsules with no external chart dependency."""

from capsule_studio.specs.capsule import CapsuleDefinition, CapsuleProp

DATAVIZ_CAPSULES: list[CapsuleDefinition] = [
    CapsuleDefinition(
        id="chart-simple",
        name="Simple Chart",
        description="Basic chart visualization",
        category="ui",
        props=[
            CapsuleProp(name="data", type="array", required=True, default=[10, 25, 40, 30, 50], description="Chart data values"),
            CapsuleProp(name="type", type="string", default="bar", description="Chart type: bar, line"),
            CapsuleProp(name="title", type="string", default="Data Chart", description="Chart title"),
        ],
        dependencies=[],
        code="""
function SimpleChart({ data = [10, 25, 40, 30, 50], type = 'bar', title = 'Data Chart' }) {
  const maxValue = Math.max(...data)

  return (
    <div className="bg-white p-6 rounded-lg shadow-md">
      <h3 className="text-lg font-bold text-gray-900 mb-4">{title}</h3>

      <div className="flex items-end gap-2 h-48">
        {data.map((value, index) => {
          const height = (value / maxValue) * 100
          return (
            <div key={index} className="flex-1 flex flex-col items-center gap-1">
              <div className="text-xs font-semibold text-gray-700">{value}</div>
              <div
                className="w-full bg-gradient-to-t from-blue-600 to-blue-400 rounded-t transition-all"
                style={{ height: `${height}%` }}
              />
              <div className="text-xs text-gray-600">{index + 1}</div>
            </div>
          )
        })}
      </div>
    </div>
  )
}""",
    ),
    CapsuleDefinition(
        id="stat-card",
        name="Stat Card",
        description="Statistical display card with trend",
        category="ui",
        props=[
            CapsuleProp(name="label", type="string", required=True, default="Total Users", description="Stat label"),
            CapsuleProp(name="value", type="string", required=True, default="1,234", description="Stat value"),
            CapsuleProp(name="change", type="number", default=12.5, description="Percentage change"),
            CapsuleProp(name="icon", type="string", default="👥", description="Icon emoji"),
        ],
        dependencies=[],
        code="""
function StatCard({ label = 'Total Users', value = '1,234', change = 12.5, icon = '👥' }) {
  const isPositive = change >= 0

  return (
    <div className="bg-white p-6 rounded-lg shadow-md border border-gray-200">
      <div className="flex items-center justify-between mb-2">
        <span className="text-2xl">{icon}</span>
        {change !== undefined && (
          <span className={`text-sm font-semibold ${isPositive ? 'text-green-600' : 'text-red-600'}`}>
            {isPositive ? '↑' : '↓'} {Math.abs(change)}%
          </span>
        )}
      </div>
      <div className="text-3xl font-bold text-gray-900 mb-1">{value}</div>
      <div className="text-sm text-gray-600">{label}</div>
    </div>
  )
}""",
    ),
]
